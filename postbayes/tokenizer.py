import pandas as pd
from nltk.tokenize import WhitespaceTokenizer

_tokenizer = WhitespaceTokenizer()


def unique_words(text):
    """Return the set of unique whitespace-delimited words in text."""
    if pd.isna(text) or not isinstance(text, str):
        return set()
    # Words are compared exactly: no case folding, no punctuation stripping
    return set(_tokenizer.tokenize(text))
