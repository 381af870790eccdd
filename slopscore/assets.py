"""Module loading lexicons and benchmark normalisation ranges."""

import json
import threading
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ValidationError

from slopscore.configuration import config
from slopscore.data_models import NormalizationRange, SlopAssets
from slopscore.detection.composite import (
    CONTRAST_METRIC,
    TRIGRAMS_METRIC,
    WORDS_METRIC,
)
from slopscore.errors import AssetsUnavailableError

WORDS_FILE = "slop_words.json"
TRIGRAMS_FILE = "slop_trigrams.json"
LEADERBOARD_FILE = "leaderboard_results.json"

# Fraction of the observed span added on both sides of a benchmark range.
RANGE_PADDING = 0.1


class BenchmarkMetrics(BaseModel):
    """Rates measured for one model of the benchmark."""

    slop_list_matches_per_1k_words: float = 0.0
    slop_trigram_matches_per_1k_words: float = 0.0
    not_x_but_y_per_1k_chars: float = 0.0


class BenchmarkResult(BaseModel):
    """A single row of the benchmark leaderboard."""

    model: str = ""
    metrics: BenchmarkMetrics | None = None


class Leaderboard(BaseModel):
    """Benchmark results used to calibrate normalisation ranges."""

    results: list[BenchmarkResult] = []


def compute_range(
    values: list[float], padding: float = RANGE_PADDING
) -> NormalizationRange:
    """
    Derive a padded normalisation range from observed values.

    Args:
        values (list[float]): Values of one metric across the benchmark.
        padding (float, optional): Fraction of the span added on both sides.
            Defaults to 0.1.

    Returns:
        NormalizationRange: The padded range, or (0, 1) if there are no values.
    """
    if not values:
        return NormalizationRange(min=0.0, max=1.0)
    low, high = min(values), max(values)
    margin = (high - low) * padding
    return NormalizationRange(min=low - margin, max=high + margin)


def _read_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exception:
        raise AssetsUnavailableError(
            f"Failed to load slop scoring asset {path}: {exception}"
        ) from exception


def _parse_lexicon(raw: object, path: Path) -> frozenset[str]:
    """Parse the `[["entry"], ["entry2"], ...]` lexicon format."""
    if not isinstance(raw, list):
        raise AssetsUnavailableError(f"Lexicon {path} must be a JSON array.")
    entries = set()
    for item in raw:
        if isinstance(item, list) and item and isinstance(item[0], str) and item[0]:
            entries.add(item[0].lower())
    return frozenset(entries)


def load_assets(directory: Path = config.assets_directory) -> SlopAssets:
    """
    Load lexicons and benchmark ranges from a directory.

    Args:
        directory (Path, optional): Directory with the asset files.
            Defaults to the value from the configuration.

    Raises:
        AssetsUnavailableError: Raised if a file is missing or malformed.

    Returns:
        SlopAssets: The loaded assets.
    """
    words = _parse_lexicon(_read_json(directory / WORDS_FILE), directory / WORDS_FILE)
    trigrams = _parse_lexicon(
        _read_json(directory / TRIGRAMS_FILE), directory / TRIGRAMS_FILE
    )
    try:
        leaderboard = Leaderboard.model_validate(
            _read_json(directory / LEADERBOARD_FILE)
        )
    except ValidationError as exception:
        raise AssetsUnavailableError(
            f"Malformed benchmark results in {directory / LEADERBOARD_FILE}: "
            f"{exception}"
        ) from exception

    measured = [result.metrics for result in leaderboard.results if result.metrics]
    ranges = {
        WORDS_METRIC: compute_range(
            [metrics.slop_list_matches_per_1k_words for metrics in measured]
        ),
        TRIGRAMS_METRIC: compute_range(
            [metrics.slop_trigram_matches_per_1k_words for metrics in measured]
        ),
        CONTRAST_METRIC: compute_range(
            [metrics.not_x_but_y_per_1k_chars for metrics in measured]
        ),
    }
    logger.info(
        f"Loaded {len(words)} slop words, {len(trigrams)} slop trigrams and "
        f"{len(measured)} benchmark results from {directory}."
    )
    return SlopAssets(words=words, trigrams=trigrams, normalization_ranges=ranges)


class AssetProvider:
    """Owner of the assets, loading them once on first use."""

    def __init__(self, directory: Path = config.assets_directory) -> None:
        """
        Remember where the assets are, without loading them yet.

        Args:
            directory (Path, optional): Directory with the asset files.
                Defaults to the value from the configuration.
        """
        self._directory = directory
        self._assets: SlopAssets | None = None
        self._lock = threading.Lock()

    def get(self) -> SlopAssets:
        """
        Get the assets, loading them if this is the first use.

        Concurrent first calls load the files only once. A failed load is not
        remembered, so the next call tries again.

        Raises:
            AssetsUnavailableError: Raised if the assets cannot be loaded.

        Returns:
            SlopAssets: The shared, immutable assets.
        """
        assets = self._assets
        if assets is not None:
            return assets
        with self._lock:
            if self._assets is None:
                self._assets = load_assets(self._directory)
            return self._assets

    def override(self, assets: SlopAssets) -> None:
        """
        Replace the assets, e.g. with test fixtures.

        Args:
            assets (SlopAssets): Assets returned by subsequent `get()` calls.
        """
        with self._lock:
            self._assets = assets

    def reset(self) -> None:
        """Forget the loaded assets, so the next `get()` loads them again."""
        with self._lock:
            self._assets = None
