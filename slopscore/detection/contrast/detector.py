"""Module with the two-stage detector of rhetorical contrast patterns."""

from loguru import logger

from slopscore.configuration import PlaceholderMode, config
from slopscore.data_models import ContrastMatch, ContrastStatus, NormalizedText
from slopscore.detection.contrast.mapping import (
    collect_stage1_candidates,
    collect_stage2_candidates,
    merge_candidates,
    to_contrast_matches,
)
from slopscore.detection.contrast.patterns import STAGE1_RULES, STAGE2_RULES, Rules
from slopscore.detection.contrast.stream import tag_stream_with_offsets
from slopscore.nlp.pos_tagger import PosTagger
from slopscore.nlp.sentence_splitter import SentenceSplitter, TerminatorSentenceSplitter

CONTRAST_MULTIPLIER = 1000


class ContrastDetector:
    """Detector of "not X, but Y" structures in surface text and POS streams."""

    def __init__(
        self,
        tagger: PosTagger | None,
        stage1_rules: Rules = STAGE1_RULES,
        stage2_rules: Rules = STAGE2_RULES,
        placeholder_mode: PlaceholderMode = config.placeholder_mode,
        sentence_splitter: SentenceSplitter | None = None,
    ) -> None:
        """
        Configure rule tables and the tagger of the structural stage.

        Args:
            tagger (PosTagger | None): Part-of-speech tagger. None disables the
                structural stage.
            stage1_rules (Rules, optional): Surface rules.
                Defaults to the built-in table.
            stage2_rules (Rules, optional): Structural rules. An empty table
                disables the structural stage. Defaults to the built-in table.
            placeholder_mode (PlaceholderMode, optional): Word class replaced with
                placeholders. Defaults to the value from the configuration.
            sentence_splitter (SentenceSplitter | None, optional): Splitter
                producing sentence spans. Defaults to splitting on `.`, `!`, `?`.
        """
        self._tagger = tagger
        self._stage1_rules = stage1_rules
        self._stage2_rules = stage2_rules
        self._placeholder_mode: PlaceholderMode = placeholder_mode
        self._sentence_splitter = sentence_splitter or TerminatorSentenceSplitter()

    @property
    def status(self) -> ContrastStatus:
        """Whether both stages run or the structural one is disabled."""
        if self._tagger is None or not self._stage2_rules:
            return ContrastStatus.SURFACE_ONLY
        return ContrastStatus.COMPLETE

    def detect(self, normalized: NormalizedText) -> list[ContrastMatch]:
        """
        Find contrast patterns, one match per group of overlapping sentences.

        Args:
            normalized (NormalizedText): The normalised text.

        Raises:
            TaggingUnavailableError: Raised if the tagger fails.

        Returns:
            list[ContrastMatch]: Matches with disjoint sentence ranges, in text order.
        """
        text = normalized.text
        spans = self._sentence_splitter.split_into_spans(text)
        if not spans:
            return []

        candidates = collect_stage1_candidates(text, spans, self._stage1_rules)

        if self._tagger is not None and self._stage2_rules:
            stream, pieces = tag_stream_with_offsets(
                text, spans, self._tagger, mode=self._placeholder_mode
            )
            candidates += collect_stage2_candidates(
                text, spans, self._stage2_rules, stream, pieces
            )

        merged = merge_candidates(candidates)
        logger.debug(
            f"Contrast detection: {len(candidates)} candidate(s) merged into "
            f"{len(merged)} match(es)."
        )
        return to_contrast_matches(text, spans, merged)

    def rate_per_1k(self, matches: list[ContrastMatch], char_count: int) -> float:
        """
        Calculate the contrast pattern rate.

        Args:
            matches (list[ContrastMatch]): Output of `detect()`.
            char_count (int): Length of the normalised text.

        Returns:
            float: Matches per 1000 characters. 0.0 for an empty text.
        """
        if char_count <= 0:
            return 0.0
        return len(matches) * CONTRAST_MULTIPLIER / char_count
