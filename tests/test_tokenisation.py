from slopscore.nlp.normaliser import normalise, normalise_quotes_and_dashes
from slopscore.nlp.sentence_splitter import TerminatorSentenceSplitter
from slopscore.nlp.tokeniser import SlopTokeniser


def test_tokeniser_lowercases_and_keeps_contractions():
    """Words are lowercased and a single inner apostrophe is kept."""
    tokens = SlopTokeniser().tokenise("Let's DELVE into it’s depths")
    assert tokens == ["let's", "delve", "into", "it's", "depths"]


def test_tokeniser_drops_multi_apostrophe_words_and_digits():
    """Tokens with several apostrophes are dropped; digits split words."""
    tokens = SlopTokeniser().tokenise("rock'n'roll abc123def 'quoted' words'")
    assert tokens == ["abc", "def", "quoted", "words"]


def test_tokeniser_empty_text():
    """An empty text has no tokens."""
    assert SlopTokeniser().tokenise("") == []


def test_normalise_keeps_length_and_case():
    """Typography is canonicalised without changing offsets."""
    raw = "“Hi” — it’s"
    normalized = normalise(raw)
    assert normalized.text == "\"Hi\" - it's"
    assert normalized.char_count == len(raw)
    assert normalized.tokens == ("hi", "it's")
    assert normalized.word_count == 2


def test_normalise_quotes_and_dashes_en_dash():
    """En dashes become hyphens as well."""
    assert normalise_quotes_and_dashes("2019–2020") == "2019-2020"


def test_sentence_spans_cover_trailing_text():
    """Text after the last terminator forms its own sentence."""
    spans = TerminatorSentenceSplitter().split_into_spans("One. Two! Three")
    assert spans == [(0, 4), (4, 9), (9, 15)]


def test_sentence_spans_of_empty_text():
    """An empty text has no sentences."""
    assert TerminatorSentenceSplitter().split_into_spans("") == []


def test_sentence_spans_are_contiguous():
    """Spans cover the whole text without overlaps."""
    text = "Dr. Smith arrived at 3.5 p.m.! Was he late? Nobody knows"
    spans = TerminatorSentenceSplitter().split_into_spans(text)
    assert spans[0][0] == 0
    assert spans[-1][1] == len(text)
    for (_, previous_end), (next_start, _) in zip(spans, spans[1:], strict=False):
        assert previous_end == next_start
