"""The configuration module."""

import tomllib
from datetime import timedelta
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from slopscore.data_models import ScoreWeights

PlaceholderMode = Literal["verb", "noun", "adj", "adv", "all"]


class Configuration(BaseModel):
    """Configuration of the application."""

    project_name: str = "Slop Score"

    api_host: str = "0.0.0.0"  # noqa: S104, it is required for Docker deployment.
    api_port: int = 7124
    api_max_requests_per_interval: int = 5
    api_rate_limiter_interval: timedelta = timedelta(seconds=1)

    assets_directory: Path = Path(__file__).parent / "resources"

    max_words: int = Field(7500, ge=1)
    weights: ScoreWeights = ScoreWeights()

    stage2_enabled: bool = True
    placeholder_mode: PlaceholderMode = "verb"
    degrade_on_tagging_failure: bool = False
    nltk_tagger_resource: str = "averaged_perceptron_tagger_eng"

    log_level: str = "INFO"


def load_configuration(
    configuration_file: Path = Path("config.toml"),
) -> Configuration:
    """
    Load configuration from the configuration file.

    Args:
        configuration_file (Path, optional): Path to a TOML file.
            Defaults to `config.toml` in the working directory.

    Returns:
        Configuration: Settings from the file, or defaults if the file is missing.
    """
    if not configuration_file.exists():
        return Configuration()
    with configuration_file.open("rb") as f:
        settings = tomllib.load(f)
    return Configuration(**settings)


config = load_configuration()
