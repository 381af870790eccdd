import nltk
import pytest

from slopscore.configuration import config
from slopscore.data_models import ContrastStatus
from slopscore.detection.contrast.detector import ContrastDetector
from slopscore.errors import TaggingUnavailableError
from slopscore.nlp.normaliser import normalise
from slopscore.nlp.pos_tagger import NLTKPosTagger


def _missing(resource: str) -> None:
    raise LookupError(resource)


@pytest.fixture
def missing_model(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Pretend the tagger model is not installed, recording download attempts."""
    downloads: list[str] = []

    def download(resource: str, quiet: bool = False) -> bool:
        downloads.append(resource)
        return True

    monkeypatch.setattr(nltk.data, "find", _missing)
    monkeypatch.setattr(nltk, "download", download)
    monkeypatch.setattr(
        nltk, "pos_tag", lambda tokens, lang: [(token, "NN") for token in tokens]
    )
    return downloads


def test_model_is_downloaded_once(missing_model: list[str]):
    """A missing model is fetched on first use only."""
    tagger = NLTKPosTagger(resource="some_tagger")
    assert tagger.tag("Hello there.") == [
        ("Hello", "NN"),
        ("there", "NN"),
        (".", "NN"),
    ]
    tagger.tag("Hello again.")
    assert missing_model == ["some_tagger"]


def test_failed_download(monkeypatch: pytest.MonkeyPatch):
    """A model that cannot be downloaded makes tagging unavailable."""
    monkeypatch.setattr(nltk.data, "find", _missing)
    monkeypatch.setattr(nltk, "download", lambda resource, quiet=False: False)
    with pytest.raises(TaggingUnavailableError):
        NLTKPosTagger(resource="some_tagger").tag("Hello there.")


@pytest.mark.parametrize("exception", [LookupError, ValueError])
def test_tagging_errors_are_wrapped(
    missing_model: list[str],
    monkeypatch: pytest.MonkeyPatch,
    exception: type[Exception],
):
    """Errors of NLTK surface as tagging failures."""

    def pos_tag(tokens: list[str], lang: str) -> list[tuple[str, str]]:
        raise exception("broken model")

    monkeypatch.setattr(nltk, "pos_tag", pos_tag)
    with pytest.raises(TaggingUnavailableError):
        NLTKPosTagger().tag("Hello there.")


def test_sentence_without_tokens(missing_model: list[str]):
    """Whitespace yields no tagged values."""
    assert NLTKPosTagger().tag("   ") == []


def test_detector_without_model_raises(monkeypatch: pytest.MonkeyPatch):
    """A detector with an unavailable model raises a tagging failure."""
    monkeypatch.setattr(nltk.data, "find", _missing)
    monkeypatch.setattr(nltk, "download", lambda resource, quiet=False: False)
    detector = ContrastDetector(tagger=NLTKPosTagger(resource="some_tagger"))
    with pytest.raises(TaggingUnavailableError):
        detector.detect(normalise("It's not a bug. It's a feature."))


@pytest.fixture(scope="module")
def tagger() -> NLTKPosTagger:
    try:
        nltk.data.find(f"taggers/{config.nltk_tagger_resource}")
    except LookupError:
        pytest.skip("The NLTK tagger model is not installed.")
    return NLTKPosTagger()


def test_tagger_keeps_contractions_whole(tagger: NLTKPosTagger):
    """Contractions and punctuation are separate tagged values."""
    tagged = tagger.tag("It doesn't work, they said.")
    values = [value for value, _ in tagged]
    assert values == ["It", "doesn't", "work", ",", "they", "said", "."]
    assert all(pos_tag for _, pos_tag in tagged)


def test_tagger_tags_verbs(tagger: NLTKPosTagger):
    """Verbs receive verb tags of the Penn Treebank."""
    tagged = dict(tagger.tag("The dog was running."))
    assert tagged["running"].startswith("VB")


def test_tagger_of_punctuation_only(tagger: NLTKPosTagger):
    """Sentences without words still tag their punctuation."""
    assert [value for value, _ in tagger.tag("...")] == [".", ".", "."]


def test_detector_with_nltk(tagger: NLTKPosTagger):
    """The structural stage runs end to end with the NLTK tagger."""
    detector = ContrastDetector(tagger=tagger)
    matches = detector.detect(normalise("It's not a bug. It's a feature."))
    assert detector.status == ContrastStatus.COMPLETE
    assert len(matches) == 1
