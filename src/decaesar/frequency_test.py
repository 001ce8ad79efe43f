import pytest
from decaesar.frequency import (
    ALPHABET_SIZE,
    COMMON_BIGRAMS,
    LETTER_WEIGHTS,
    common_bigrams,
    letter_index,
    letter_weight,
)


class TestLetterWeights:
    """Test suite for the single letter frequency table"""

    def test_table_size(self):
        """Test there is one weight per letter"""
        assert len(LETTER_WEIGHTS) == ALPHABET_SIZE

    def test_weights_positive(self):
        """Test every weight is positive"""
        assert all(w > 0 for w in LETTER_WEIGHTS)

    def test_known_weights(self):
        """Test a few well known letters"""
        assert letter_weight("e") == 12.02
        assert letter_weight("Z") == 0.07
        assert letter_weight(ord("t")) == 9.10
        assert letter_weight(b"A") == 8.12

    def test_case_insensitive(self):
        """Test upper and lower case map to the same weight"""
        for lower in range(ord("a"), ord("z") + 1):
            assert letter_weight(lower) == letter_weight(lower - 32)

    def test_most_frequent_is_e(self):
        """Test E carries the highest weight"""
        assert max(range(ALPHABET_SIZE), key=lambda i: LETTER_WEIGHTS[i]) == letter_index("e")

    @pytest.mark.parametrize("value", ["1", " ", "é", ord("["), ord("@")])
    def test_not_a_letter(self, value):
        """Test non letters are rejected"""
        with pytest.raises(ValueError, match="Not an ASCII letter"):
            letter_weight(value)

    def test_multiple_characters(self):
        """Test multi character strings are rejected"""
        with pytest.raises(ValueError, match="single letter"):
            letter_weight("ab")


class TestCommonBigrams:
    """Test suite for the common bigram table"""

    def test_table_size(self):
        """Test the table holds 20 pairs"""
        assert len(common_bigrams()) == 20

    def test_order_preserved(self):
        """Test the first and last entries"""
        pairs = common_bigrams()
        assert pairs[0] == (ord("t"), ord("h"))
        assert pairs[1] == (ord("h"), ord("e"))
        assert pairs[-1] == (ord("l"), ord("e"))

    def test_no_duplicates(self):
        """Test each pair appears once"""
        assert len(set(COMMON_BIGRAMS)) == len(COMMON_BIGRAMS)

    def test_lowercase_letters_only(self):
        """Test every pair is made of lowercase letters"""
        for first, second in common_bigrams():
            assert chr(first).islower() and chr(second).islower()
