"""Deterministic collaborators for the extractor tests."""

import pytest


class SplitTokenizer:
    def __init__(self):
        self.calls = []

    def tokenize(self, text):
        self.calls.append(text)
        return text.split()


class DictStemmer:
    """Maps listed words, leaves everything else unchanged."""

    def __init__(self, mapping=None):
        self.mapping = dict(mapping or {})
        self.seen = []

    def stem(self, word):
        self.seen.append(word)
        return self.mapping.get(word, word)


class SetStopWords:
    def __init__(self, words=()):
        self.words = set(words)

    def is_stop_word(self, word):
        return word in self.words


class FakeDetector:
    def __init__(self, sentences):
        self.sentences = list(sentences)
        self.calls = 0

    def detect(self, text):
        self.calls += 1
        return list(self.sentences)


@pytest.fixture
def tokenizer():
    return SplitTokenizer()


@pytest.fixture
def stemmer():
    return DictStemmer()


@pytest.fixture
def no_stop_words():
    return SetStopWords()


FOX_TEXT = "The running fox jumped. The running fox ran again quickly through fields."
