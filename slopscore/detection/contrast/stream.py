"""Module building the placeholder stream for the structural contrast rules."""

from collections.abc import Sequence

from slopscore.configuration import PlaceholderMode
from slopscore.data_models import SentenceSpan, StreamPiece
from slopscore.errors import TaggingUnavailableError
from slopscore.nlp.pos_tagger import PosTagger

VERB_TAGS = frozenset({"VB", "VBD", "VBG", "VBN", "VBP", "VBZ"})
NOUN_TAGS = frozenset({"NN", "NNS", "NNP", "NNPS"})
ADJ_TAGS = frozenset({"JJ", "JJR", "JJS"})
ADV_TAGS = frozenset({"RB", "RBR", "RBS"})

_PLACEHOLDERS: dict[str, tuple[frozenset[str], str]] = {
    "verb": (VERB_TAGS, "VERB"),
    "noun": (NOUN_TAGS, "NOUN"),
    "adj": (ADJ_TAGS, "ADJ"),
    "adv": (ADV_TAGS, "ADV"),
}

def get_pos_replacement(pos_tag: str | None, mode: PlaceholderMode) -> str | None:
    """
    Get the placeholder replacing a word with a given tag.

    Args:
        pos_tag (str | None): Penn Treebank tag of the word.
        mode (PlaceholderMode): Word class to be replaced, or "all".

    Returns:
        str | None: `VERB`, `NOUN`, `ADJ` or `ADV`, or None if the word stays.
    """
    if not pos_tag:
        return None
    classes = _PLACEHOLDERS.values() if mode == "all" else [_PLACEHOLDERS[mode]]
    for tags, placeholder in classes:
        if pos_tag in tags:
            return placeholder
    return None


class StreamBuilder:
    """Builder of the placeholder stream and its piece table."""

    def __init__(self) -> None:
        """Start an empty stream."""
        self._parts: list[str] = []
        self._pieces: list[StreamPiece] = []
        self._stream_position = 0

    def emit(self, value: str, raw_start: int, raw_end: int) -> None:
        """
        Append a unit of the stream mapped onto a range of the raw text.

        Args:
            value (str): Text appended to the stream.
            raw_start (int): Start offset of the unit in the raw text.
            raw_end (int): End offset of the unit in the raw text, exclusive.
        """
        if not value:
            return
        self._parts.append(value)
        stream_end = self._stream_position + len(value)
        self._pieces.append((self._stream_position, stream_end, raw_start, raw_end))
        self._stream_position = stream_end

    def build(self) -> tuple[str, list[StreamPiece]]:
        """
        Get the stream and its piece table.

        Returns:
            tuple[str, list[StreamPiece]]: The stream and the pieces of it.
        """
        return "".join(self._parts), list(self._pieces)


def tag_stream_with_offsets(
    text: str,
    spans: Sequence[SentenceSpan],
    tagger: PosTagger,
    mode: PlaceholderMode = "verb",
) -> tuple[str, list[StreamPiece]]:
    """
    Replace tagged words with placeholders, recording offsets of every unit.

    Sentences are tagged one at a time. Text between tagged tokens is copied to
    the stream as is, so every character of the text belongs to exactly one piece.

    Args:
        text (str): The normalised text.
        spans (Sequence[SentenceSpan]): Sentence spans of the text.
        tagger (PosTagger): The part-of-speech tagger.
        mode (PlaceholderMode, optional): Word class to be replaced.
            Defaults to "verb".

    Raises:
        TaggingUnavailableError: Raised if the tagger fails or returns a value
            that does not occur in the sentence.

    Returns:
        tuple[str, list[StreamPiece]]: The stream and its piece table.
    """
    builder = StreamBuilder()
    raw_position = 0

    for span_start, span_end in spans:
        sentence = text[span_start:span_end]
        if not sentence.strip():
            continue

        cursor = 0
        for value, pos_tag in tagger.tag(sentence):
            if not value:
                continue
            found = sentence.find(value, cursor)
            if found == -1:
                raise TaggingUnavailableError(
                    f"The tagger returned `{value}` which does not occur in the "
                    f"sentence after offset {cursor}."
                )
            token_start = span_start + found
            token_end = token_start + len(value)

            builder.emit(text[raw_position:token_start], raw_position, token_start)

            replacement = get_pos_replacement(pos_tag, mode)
            builder.emit(replacement or value, token_start, token_end)

            raw_position = token_end
            cursor = found + len(value)

    builder.emit(text[raw_position:], raw_position, len(text))
    return builder.build()
