"""Module with exceptions raised by the slop scoring library."""


class SlopScoreError(Exception):
    """Base class of all errors raised while scoring a text."""


class TaggingUnavailableError(SlopScoreError):
    """Raised when the part-of-speech tagger cannot process a sentence."""


class AssetsUnavailableError(SlopScoreError):
    """Raised when lexicons or benchmark results cannot be loaded."""


class UnsupportedLanguageError(SlopScoreError):
    """Raised when a text in a language other than English is submitted."""

    def __init__(self, language: str) -> None:
        """
        Remember the rejected language.

        Args:
            language (str): The language requested by the caller.
        """
        super().__init__(
            f"Unsupported language: `{language}`. Only `english` is supported."
        )
        self.language = language


class InputTooLargeError(SlopScoreError):
    """Raised when a text exceeds the maximum supported size."""

    def __init__(self, actual: int, maximum: int, unit: str = "words") -> None:
        """
        Remember the size of the rejected input.

        Args:
            actual (int): Size of the submitted text.
            maximum (int): The maximum accepted size.
            unit (str, optional): Unit of both sizes. Defaults to "words".
        """
        super().__init__(f"Input too large. Got {actual} {unit}, maximum is {maximum}.")
        self.actual = actual
        self.maximum = maximum
        self.unit = unit


class InsufficientTextError(SlopScoreError):
    """Raised when nothing is left to score after removing markup."""
