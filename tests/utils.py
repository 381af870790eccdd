"""Texts and stub taggers shared by the tests."""

import re
from typing_extensions import override

from slopscore.errors import TaggingUnavailableError
from slopscore.nlp.pos_tagger import PosTagger, TaggedToken

LOW_SLOP_TEXT = """The quarterly report indicates a 15% increase in customer acquisition
           compared to the previous period. Revenue grew by $2.3 million, driven
           primarily by expansion in the European market. Operating costs remained
           stable, with a slight decrease in marketing spend offset by increased
           investment in customer support infrastructure."""

HIGH_SLOP_TEXT = """Let's delve into this vibrant tapestry of innovation that's not just
           transforming but revolutionizing the industry landscape. This paradigm
           shift represents a synergy between cutting-edge technology and human
           ingenuity. It's important to note that these groundbreaking developments
           are not merely incremental but truly transformative."""

PATTERN_HEAVY_TEXT = """This solution is not just a product but a platform. It's not only
           innovative but revolutionary. The approach is not merely useful but
           essential. We're not simply improving but reimagining the entire
           experience."""

TRIGRAM_HEAVY_TEXT = """It's important to note that in order to achieve success, we need to
           carefully consider all factors. It is worth mentioning that this
           approach allows us to effectively address the challenges at hand."""


class StubTagger(PosTagger):
    """Tagger marking `-ing` words as gerunds and forms of `be` as verbs."""

    _TOKEN = re.compile(r"\w+(?:'\w+)*|[^\w\s]")
    _BE = frozenset({"is", "are", "was", "were"})

    def __init__(self) -> None:
        self.calls = 0

    @override
    def tag(self, sentence: str) -> list[TaggedToken]:
        self.calls += 1
        tagged = []
        for value in self._TOKEN.findall(sentence):
            if not value[0].isalnum():
                tagged.append((value, value))
            elif value.lower().endswith("ing"):
                tagged.append((value, "VBG"))
            elif value.lower() in self._BE:
                tagged.append((value, "VBD"))
            else:
                tagged.append((value, "NN"))
        return tagged


class FailingTagger(PosTagger):
    """Tagger that always fails."""

    @override
    def tag(self, sentence: str) -> list[TaggedToken]:
        raise TaggingUnavailableError("The tagger model is missing.")


class MisalignedTagger(PosTagger):
    """Tagger returning a value that does not occur in the sentence."""

    @override
    def tag(self, sentence: str) -> list[TaggedToken]:
        return [("nonexistent", "NN")]
