"""Module normalising typography of a text before scoring."""

from slopscore.data_models import NormalizedText

# Every replacement is a single character, so offsets stay unchanged.
QUOTE_MAP: dict[str, str] = {
    "‘": "'",  # left single quotation mark
    "’": "'",  # right single quotation mark
    "‚": "'",  # single low-9 quotation mark
    "‛": "'",  # single high-reversed-9 quotation mark
    "′": "'",  # prime
    "ʼ": "'",  # modifier letter apostrophe
    "＇": "'",  # fullwidth apostrophe
    "`": "'",
    "“": '"',  # left double quotation mark
    "”": '"',  # right double quotation mark
    "„": '"',  # double low-9 quotation mark
    "‟": '"',  # double high-reversed-9 quotation mark
    "″": '"',  # double prime
    "«": '"',  # left-pointing double angle quotation mark
    "»": '"',  # right-pointing double angle quotation mark
    "＂": '"',  # fullwidth quotation mark
}

DASH_MAP: dict[str, str] = {
    "—": "-",  # em dash
    "–": "-",  # en dash
}

_QUOTE_TABLE = str.maketrans(QUOTE_MAP)
_TYPOGRAPHY_TABLE = str.maketrans(QUOTE_MAP | DASH_MAP)


def normalise_quotes(text: str) -> str:
    """
    Replace curly and look-alike quotes with straight ones.

    Args:
        text (str): Text to be normalised.

    Returns:
        str: The text with only `'` and `"` quote characters.
    """
    return text.translate(_QUOTE_TABLE)


def normalise_quotes_and_dashes(text: str) -> str:
    """
    Replace quote variants with straight quotes and em/en dashes with hyphens.

    Args:
        text (str): Text to be normalised.

    Returns:
        str: Text of the same length in the canonical typography.
    """
    return text.translate(_TYPOGRAPHY_TABLE)


def normalise(text: str) -> NormalizedText:
    """
    Normalise a plain text and tokenise it into lowercase words.

    Args:
        text (str): Plain text, already stripped of any markup.

    Returns:
        NormalizedText: The normalised text with its word tokens.
    """
    from slopscore.nlp.tokeniser import SlopTokeniser

    normalised = normalise_quotes_and_dashes(text)
    tokens = tuple(SlopTokeniser().tokenise(normalised))
    return NormalizedText(
        text=normalised,
        char_count=len(normalised),
        word_count=len(tokens),
        tokens=tokens,
    )
