import pytest

from slopscore.assets import AssetProvider, load_assets
from slopscore.data_models import SlopAssets
from slopscore.detection.contrast.detector import ContrastDetector
from slopscore.service import SlopScoreService
from tests.utils import StubTagger


@pytest.fixture(scope="session")
def assets() -> SlopAssets:
    return load_assets()


@pytest.fixture
def asset_provider(assets: SlopAssets) -> AssetProvider:
    provider = AssetProvider()
    provider.override(assets)
    return provider


@pytest.fixture
def surface_detector() -> ContrastDetector:
    return ContrastDetector(tagger=None)


@pytest.fixture
def stub_detector() -> ContrastDetector:
    return ContrastDetector(tagger=StubTagger())


@pytest.fixture
def service(
    asset_provider: AssetProvider, surface_detector: ContrastDetector
) -> SlopScoreService:
    return SlopScoreService(
        asset_provider=asset_provider,
        detector=surface_detector,
        max_words=7500,
        degrade_on_tagging_failure=False,
    )
