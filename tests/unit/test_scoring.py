"""Unit tests for relevance scoring."""

from whitepaper_server.core.scoring import calculate_relevance, extract_terms


class TestExtractTerms:
    """Test query tokenization."""

    def test_drops_short_terms(self):
        assert extract_terms("a zk proof of sp1") == ["proof", "sp1"]

    def test_splits_on_any_whitespace(self):
        assert extract_terms("proof\tcontests\n  pools") == ["proof", "contests", "pools"]

    def test_lowercases_terms(self):
        assert extract_terms("Proof CONTESTS") == ["proof", "contests"]


class TestCalculateRelevance:
    """Test keyword relevance scoring."""

    def test_phrase_and_whole_word_terms(self):
        """Phrase bonus plus substring and whole-word credit for each term."""
        assert calculate_relevance("proof contests are auctions", "proof contests") == 20

    def test_substring_without_whole_word(self):
        """'proof' inside 'proofs' earns phrase and substring credit only."""
        assert calculate_relevance("proofs everywhere", "proof") == 12

    def test_no_match_scores_zero(self):
        assert calculate_relevance("provers bid for requests", "bitcoin mining") == 0

    def test_short_terms_are_ignored(self):
        assert calculate_relevance("the proof contest", "zk") == 0

    def test_short_terms_still_count_as_phrase(self):
        assert calculate_relevance("a an apple", "a an") == 10

    def test_case_insensitive(self):
        text = "SP1 is a zkVM"
        assert calculate_relevance(text, "sp1") == 15
        assert calculate_relevance(text.upper(), "sp1") == calculate_relevance(text, "SP1")

    def test_empty_and_whitespace_queries(self):
        assert calculate_relevance("some   text", "") == 0
        assert calculate_relevance("some   text", "   ") == 0

    def test_repeated_terms_count_each_time(self):
        assert calculate_relevance("proof", "proof proof") == 10

    def test_hyphenated_term_matches_whole_word(self):
        assert calculate_relevance("users submit risc-v programs", "risc-v") == 15

    def test_regex_characters_in_terms(self):
        """Terms are matched literally, never as patterns."""
        assert calculate_relevance("c++ code", "c++") == 12
        assert calculate_relevance("plain text", "(.*)") == 0

    def test_additional_term_never_lowers_score(self):
        text = "provers deposit collateral"
        assert calculate_relevance(text, "provers deposit") == 20
        assert calculate_relevance(text, "provers deposit collateral") == 25

    def test_deterministic(self):
        text = "Proof contests are the core mechanism"
        assert calculate_relevance(text, "core mechanism") == calculate_relevance(
            text, "core mechanism"
        )
