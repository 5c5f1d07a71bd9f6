"""Tests for Shannon entropy."""

import math

import pytest

from leaksniff.risk.entropy import shannon_entropy


def test_empty_string_has_zero_entropy():
    assert shannon_entropy("") == 0.0


@pytest.mark.parametrize("value", ["a", "aaaa", "zzzzzzzzzzzzzzzzzzzz"])
def test_repeated_character_has_zero_entropy(value):
    assert shannon_entropy(value) == 0.0


@pytest.mark.parametrize("value", ["ab", "abcd", "0123456789abcdef"])
def test_distinct_characters_give_log2_n(value):
    assert shannon_entropy(value) == pytest.approx(math.log2(len(value)))


def test_random_looking_string_scores_higher():
    low = shannon_entropy("aaaaaaaaaaaaaaaa")
    high = shannon_entropy("aZ8fK2pQ9xM1sL4t")
    assert high > low
