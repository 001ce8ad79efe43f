import pytest
from decaesar.frequency import BIGRAM_BONUS, letter_weight
from decaesar.scoring import DEFAULT_SCORER, FrequencyScorer, Scorer, score_shift


class TestScoreShift:
    """Test suite for the default frequency scorer"""

    def test_empty_input(self):
        """Test empty input scores zero for every shift"""
        for shift in range(26):
            assert score_shift(b"", shift) == 0.0

    def test_single_letter(self):
        """Test a single letter scores its weight"""
        assert score_shift(b"e", 0) == letter_weight("e")

    def test_letter_is_rotated(self):
        """Test the weight of the shifted letter is used"""
        assert score_shift(b"a", 4) == letter_weight("e")

    def test_bigram_bonus(self):
        """Test a common pair earns the bonus on top of both weights"""
        expected = letter_weight("t") + letter_weight("h") + BIGRAM_BONUS
        assert score_shift(b"th", 0) == pytest.approx(expected)

    def test_bigram_after_shift(self):
        """Test bigrams are matched on the shifted letters"""
        # "sg" shifted by 1 is "th"
        assert score_shift(b"sg", 1) == pytest.approx(score_shift(b"th", 0))

    def test_uncommon_pair(self):
        """Test an uncommon pair only scores the letters"""
        expected = letter_weight("h") + letter_weight("t")
        assert score_shift(b"ht", 0) == pytest.approx(expected)

    def test_non_letter_breaks_bigram(self):
        """Test a non letter between two letters prevents the bonus"""
        expected = letter_weight("t") + letter_weight("h")
        assert score_shift(b"t h", 0) == pytest.approx(expected)
        assert score_shift(b"t1h", 0) == pytest.approx(expected)

    def test_non_letters_score_zero(self):
        """Test digits, whitespace and punctuation contribute nothing"""
        for shift in range(26):
            assert score_shift(b"12345 ,.!?\n", shift) == 0.0

    def test_chained_bigrams(self):
        """Test overlapping pairs each earn a bonus"""
        # "the" contains both "th" and "he"
        expected = letter_weight("t") + letter_weight("h") + letter_weight("e") + 2 * BIGRAM_BONUS
        assert score_shift(b"the", 0) == pytest.approx(expected)

    @pytest.mark.parametrize("shift", [0, 5, 13, 25])
    def test_case_invariant(self, shift):
        """Test upper case input scores exactly like lower case"""
        text = b"the quick brown fox jumps over the lazy dog"
        assert score_shift(text, shift) == score_shift(text.upper(), shift)
        assert score_shift(b"Hello World", shift) == score_shift(b"hello world", shift)

    def test_monotonic_in_length(self):
        """Test appending bytes never lowers the score"""
        text = b"Attack at dawn, hold the line!"
        for shift in (0, 9):
            scores = [score_shift(text[:n], shift) for n in range(len(text) + 1)]
            assert scores == sorted(scores)

    def test_plaintext_scores_higher(self):
        """Test English text beats a wrong shift of itself"""
        text = b"hello world"
        assert score_shift(text, 0) > score_shift(text, 1)


class TestFrequencyScorer:
    """Test suite for FrequencyScorer configuration"""

    def test_default_scorer_is_scorer(self):
        """Test the default scorer satisfies the protocol"""
        scorer: Scorer = DEFAULT_SCORER
        assert scorer.score(b"e", 0) == letter_weight("e")

    def test_custom_tables(self):
        """Test replacement weights and bigrams are used"""
        scorer = FrequencyScorer(
            letter_weights=[1.0] * 26,
            bigrams=[(ord("z"), ord("z"))],
            bigram_bonus=5.0,
        )
        assert scorer.score(b"zz", 0) == 7.0
        assert scorer.score(b"th", 0) == 2.0

    def test_score_shift_with_scorer(self):
        """Test score_shift delegates to a given scorer"""
        scorer = FrequencyScorer(letter_weights=[0.0] * 26, bigrams=[], bigram_bonus=0.0)
        assert score_shift(b"hello", 3, scorer) == 0.0

    def test_wrong_weight_count(self):
        """Test the weight table must cover the alphabet"""
        with pytest.raises(ValueError, match="Expected 26 letter weights"):
            FrequencyScorer(letter_weights=[1.0] * 25)

    def test_negative_weight(self):
        """Test negative weights are rejected"""
        with pytest.raises(ValueError, match="non-negative"):
            FrequencyScorer(letter_weights=[-1.0] + [1.0] * 25)

    def test_duplicate_bigrams(self):
        """Test a bigram table with duplicates is rejected"""
        with pytest.raises(ValueError, match="duplicate"):
            FrequencyScorer(bigrams=[(ord("t"), ord("h")), (ord("t"), ord("h"))])

    def test_falsy_scorer_is_used(self):
        """Test score_shift does not swap a falsy scorer for the default"""

        class EmptyModelScorer:
            def __len__(self):
                return 0

            def score(self, data, shift):
                return -1.0

        assert score_shift(b"hello", 0, EmptyModelScorer()) == -1.0
