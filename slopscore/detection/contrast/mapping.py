"""Module mapping rule matches onto sentences and merging overlapping ones."""

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

from loguru import logger

from slopscore.data_models import Candidate, ContrastMatch, SentenceSpan, StreamPiece
from slopscore.detection.contrast.patterns import Rules

STAGE1_PREFIX = "S1_"
STAGE2_PREFIX = "S2_"


def covered_sentence_range(
    spans: Sequence[SentenceSpan], start: int, end: int
) -> tuple[int, int] | None:
    """
    Find the sentences overlapped by a character range.

    Args:
        spans (Sequence[SentenceSpan]): Sorted sentence spans of the text.
        start (int): Start offset of the range.
        end (int): End offset of the range, exclusive.

    Returns:
        tuple[int, int] | None: Indices of the first and the last overlapped
            sentence, or None if the range is empty or falls between sentences.
    """
    if not spans or start >= end:
        return None

    starts = [span_start for span_start, _ in spans]
    ends = [span_end for _, span_end in spans]
    lo = bisect_right(ends, start)
    hi = bisect_left(starts, end) - 1
    if lo >= len(spans) or hi < 0 or lo > hi:
        return None
    return lo, hi


def map_stream_to_raw(
    pieces: Sequence[StreamPiece],
    stream_start: int,
    stream_end: int,
    stream_starts: Sequence[int] | None = None,
    stream_ends: Sequence[int] | None = None,
) -> tuple[int, int] | None:
    """
    Translate a range of the placeholder stream back into raw text offsets.

    Args:
        pieces (Sequence[StreamPiece]): The piece table of the stream.
        stream_start (int): Start offset of the range in the stream.
        stream_end (int): End offset of the range in the stream, exclusive.
        stream_starts (Sequence[int] | None, optional): Precomputed stream start
            offsets of the pieces. Computed if omitted.
        stream_ends (Sequence[int] | None, optional): Precomputed stream end
            offsets of the pieces. Computed if omitted.

    Returns:
        tuple[int, int] | None: The raw (start, end) covered by the pieces
            overlapping the range, or None if no piece overlaps it.
    """
    if stream_starts is None:
        stream_starts = [piece[0] for piece in pieces]
    if stream_ends is None:
        stream_ends = [piece[1] for piece in pieces]

    first = bisect_right(stream_ends, stream_start)
    last = bisect_left(stream_starts, stream_end) - 1
    if first >= len(pieces) or last < first:
        return None

    covering = pieces[first : last + 1]
    return min(piece[2] for piece in covering), max(piece[3] for piece in covering)


def collect_stage1_candidates(
    text: str,
    spans: Sequence[SentenceSpan],
    rules: Rules,
    prefix: str = STAGE1_PREFIX,
) -> list[Candidate]:
    """
    Run surface rules on the normalised text.

    Args:
        text (str): The normalised text.
        spans (Sequence[SentenceSpan]): Sentence spans of the text.
        rules (Rules): Named surface rules.
        prefix (str, optional): Prefix of pattern names. Defaults to "S1_".

    Returns:
        list[Candidate]: Matches resolved to the sentences they cover.
    """
    candidates: list[Candidate] = []
    for name, rule in rules.items():
        for match in rule.finditer(text):
            covered = covered_sentence_range(spans, match.start(), match.end())
            if covered is None:
                continue
            candidates.append(
                Candidate(
                    sentence_lo=covered[0],
                    sentence_hi=covered[1],
                    raw_start=match.start(),
                    raw_end=match.end(),
                    pattern_name=f"{prefix}{name}",
                    match_text=match.group(0).strip(),
                )
            )
    return candidates


def collect_stage2_candidates(
    text: str,
    spans: Sequence[SentenceSpan],
    rules: Rules,
    stream: str,
    pieces: Sequence[StreamPiece],
    prefix: str = STAGE2_PREFIX,
) -> list[Candidate]:
    """
    Run structural rules on the placeholder stream and map matches to the text.

    Args:
        text (str): The normalised text.
        spans (Sequence[SentenceSpan]): Sentence spans of the text.
        rules (Rules): Named structural rules.
        stream (str): The text with placeholders substituted for tagged words.
        pieces (Sequence[StreamPiece]): The piece table of the stream.
        prefix (str, optional): Prefix of pattern names. Defaults to "S2_".

    Returns:
        list[Candidate]: Matches resolved to raw offsets and covered sentences.
    """
    candidates: list[Candidate] = []
    stream_starts = [piece[0] for piece in pieces]
    stream_ends = [piece[1] for piece in pieces]

    for name, rule in rules.items():
        for match in rule.finditer(stream):
            raw = map_stream_to_raw(
                pieces, match.start(), match.end(), stream_starts, stream_ends
            )
            if raw is None:
                logger.debug(
                    f"Discarding {prefix}{name} match at stream offsets "
                    f"{match.start()}-{match.end()}: no piece covers it."
                )
                continue
            covered = covered_sentence_range(spans, *raw)
            if covered is None:
                continue
            candidates.append(
                Candidate(
                    sentence_lo=covered[0],
                    sentence_hi=covered[1],
                    raw_start=raw[0],
                    raw_end=raw[1],
                    pattern_name=f"{prefix}{name}",
                    match_text=text[raw[0] : raw[1]].strip(),
                )
            )
    return candidates


def merge_candidates(candidates: Sequence[Candidate]) -> list[Candidate]:
    """
    Merge candidates covering overlapping sentence ranges.

    The candidate starting a merged group keeps its pattern name and match text.

    Args:
        candidates (Sequence[Candidate]): Candidates of both stages.

    Returns:
        list[Candidate]: Candidates with disjoint sentence ranges, in text order.
    """
    if not candidates:
        return []

    ordered = sorted(
        candidates,
        key=lambda candidate: (
            candidate.sentence_lo,
            candidate.sentence_hi,
            candidate.raw_start,
        ),
    )
    merged: list[Candidate] = []
    current = ordered[0].model_copy()
    for candidate in ordered[1:]:
        if candidate.sentence_lo <= current.sentence_hi:
            current.sentence_hi = max(current.sentence_hi, candidate.sentence_hi)
            current.raw_end = max(current.raw_end, candidate.raw_end)
        else:
            merged.append(current)
            current = candidate.model_copy()
    merged.append(current)
    return merged


def to_contrast_matches(
    text: str, spans: Sequence[SentenceSpan], merged: Sequence[Candidate]
) -> list[ContrastMatch]:
    """
    Expand merged candidates to the whole sentences they cover.

    Args:
        text (str): The normalised text.
        spans (Sequence[SentenceSpan]): Sentence spans of the text.
        merged (Sequence[Candidate]): Output of `merge_candidates()`.

    Returns:
        list[ContrastMatch]: One match per merged group.
    """
    matches: list[ContrastMatch] = []
    for candidate in merged:
        block_start = spans[candidate.sentence_lo][0]
        block_end = spans[candidate.sentence_hi][1]
        matches.append(
            ContrastMatch(
                sentence=text[block_start:block_end].strip(),
                pattern_name=candidate.pattern_name,
                match_text=candidate.match_text,
                sentence_count=candidate.sentence_hi - candidate.sentence_lo + 1,
            )
        )
    return matches
