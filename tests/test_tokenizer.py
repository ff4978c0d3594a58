import numpy as np

from postbayes.tokenizer import unique_words


def test_splits_on_whitespace():
    assert unique_words("study hard") == {"study", "hard"}


def test_collapses_duplicates():
    assert unique_words("the cat the hat the") == {"the", "cat", "hat"}


def test_mixed_whitespace():
    assert unique_words("  a\tb\n\nc  ") == {"a", "b", "c"}


def test_empty_and_blank_input():
    assert unique_words("") == set()
    assert unique_words("   \t\n") == set()


def test_no_normalization():
    assert unique_words("Cards cards cards.") == {"Cards", "cards", "cards."}


def test_missing_value_is_empty():
    assert unique_words(None) == set()
    assert unique_words(np.nan) == set()
