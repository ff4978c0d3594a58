"""
Naive Bayes topic classification for short text posts.
"""

from postbayes.naive_bayes import NaiveBayesClassifier
from postbayes.tokenizer import unique_words

__all__ = ['NaiveBayesClassifier', 'unique_words']
__version__ = '0.1.0'
