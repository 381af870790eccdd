"""Module with a text sanitiser."""

import html
import re

_LOOKS_LIKE_HTML = re.compile(r"<[a-z][a-z0-9]*[\s>]", flags=re.IGNORECASE)
_BLOCK_TAGS = "p|div|br|li|ul|ol|h[1-6]|tr|table|blockquote|section|article|pre"


def looks_like_html(text: str) -> bool:
    """
    Check whether a text contains at least one opening HTML tag.

    Args:
        text (str): Text to be checked.

    Returns:
        bool: True if a tag such as `<p>` or `<div class=...` is present.
    """
    return _LOOKS_LIKE_HTML.search(text) is not None


def strip_html(text: str) -> str:
    """
    Reduce an HTML document to the text a reader would see.

    Args:
        text (str): HTML markup.

    Returns:
        str: Visible text with block elements separated by line breaks.
    """
    # Remove invisible content and images.
    text = re.sub(
        r"<(script|style)\b[^>]*>.*?</\1\s*>",
        "",
        text,
        flags=re.DOTALL | re.IGNORECASE,
    )
    text = re.sub(r"<img\b[^>]*>", "", text, flags=re.IGNORECASE)
    text = re.sub(r"<!--.*?-->", "", text, flags=re.DOTALL)

    # Block-level tags end a line, so sentences do not run together.
    text = re.sub(rf"</?(?:{_BLOCK_TAGS})\b[^>]*>", "\n", text, flags=re.IGNORECASE)

    # Remove the remaining tags, keeping the text of links and emphasis.
    text = re.sub(r"<[^>]+>", "", text)
    return html.unescape(text)


def strip_markdown(text: str) -> str:
    """
    Remove Markdown formatting, keeping the content.

    Args:
        text (str): Markdown text.

    Returns:
        str: Text without headers, emphasis, links, code, lists and quotes.
    """
    # Remove markdown code blocks ```code```.
    text = re.sub(r"```[^`]*```", "", text)

    # Remove markdown headers (# ## ###).
    text = re.sub(r"^#{1,6}\s+", "", text, flags=re.MULTILINE)

    # Remove markdown emphasis/bold (**text**, *text*, __text__, _text_).
    text = re.sub(r"\*\*(.+?)\*\*", r"\1", text)
    text = re.sub(r"__(.+?)__", r"\1", text)
    text = re.sub(r"\*(.+?)\*", r"\1", text)
    text = re.sub(r"\b_(.+?)_\b", r"\1", text)

    # Remove markdown images ![alt](url) before links [text](url) -> text.
    text = re.sub(r"!\[([^\]]*)\]\([^)]+\)", "", text)
    text = re.sub(r"\[([^\]]+)\]\([^)]+\)", r"\1", text)

    # Remove inline code `code`.
    text = re.sub(r"`([^`]+)`", r"\1", text)

    # Remove horizontal rules (---, ***, ___) before list bullets.
    text = re.sub(r"^\s*[-*_]{3,}\s*$", "", text, flags=re.MULTILINE)

    # Remove markdown list bullets (* - +) and numbered lists (1. 2. etc).
    text = re.sub(r"^\s*[-*+]\s+", "", text, flags=re.MULTILINE)
    text = re.sub(r"^\s*\d+\.\s+", "", text, flags=re.MULTILINE)

    # Remove markdown blockquotes (>).
    return re.sub(r"^\s*>\s?", "", text, flags=re.MULTILINE)


def sanitise(text: str) -> str:
    """
    Remove markup and normalise whitespace for scoring.

    HTML is stripped only if the text contains tags, Markdown always.

    Args:
        text (str): Raw text potentially containing formatting.

    Returns:
        str: Cleaned text with only content and natural punctuation.
    """
    if looks_like_html(text):
        text = strip_html(text)
    text = strip_markdown(text)

    # Collapse whitespace runs, including line breaks, to single spaces.
    return re.sub(r"\s+", " ", text).strip()
