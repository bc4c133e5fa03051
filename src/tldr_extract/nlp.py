"""
Capability contracts consumed by the extractors, plus the concrete
nltk-backed implementations the CLI wires in.

The extractors only ever see the Protocols, so tests (or other callers)
can pass any object with the right method.
"""
from __future__ import annotations
from pathlib import Path
from typing import FrozenSet, Iterable, List, Protocol, Sequence

from nltk.stem.snowball import SnowballStemmer as _NltkSnowball
from nltk.tokenize import RegexpTokenizer


class TokenizationError(ValueError):
    pass


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> Sequence[str]: ...


class StopWordChecker(Protocol):
    def is_stop_word(self, word: str) -> bool: ...


class Stemmer(Protocol):
    def stem(self, word: str) -> str: ...


class SentenceDetector(Protocol):
    def detect(self, text: str) -> Sequence[str]: ...


# --- tokenizers ---

def _check_text(text) -> str:
    if text is None:
        raise TokenizationError("cannot tokenize None")
    if not isinstance(text, str):
        raise TokenizationError(f"cannot tokenize {type(text).__name__}")
    return text

class WhitespaceTokenizer:
    def tokenize(self, text: str) -> List[str]:
        return _check_text(text).split()

class WordTokenizer:
    """Runs of word characters; punctuation is dropped."""

    def __init__(self, pattern: str = r"\w+"):
        self._tok = RegexpTokenizer(pattern)

    def tokenize(self, text: str) -> List[str]:
        return self._tok.tokenize(_check_text(text))

TOKENIZERS = {
    "whitespace": WhitespaceTokenizer,
    "word": WordTokenizer,
}

def make_tokenizer(name: str) -> Tokenizer:
    try:
        return TOKENIZERS[name]()
    except KeyError:
        raise ValueError(f"unknown tokenizer {name!r} (choose from {', '.join(sorted(TOKENIZERS))})") from None


# --- stop words ---

# minimal English list used when no file / corpus is configured
DEFAULT_STOP_WORDS = frozenset("""
a about above after again against all also although among an and any are around
as at be because been before being below between both but by can could did do
does doing down during each either every few for from further had has have
having he her here hers herself him himself his how however i if in into is it
its itself just least less made many might more most much must my myself
neither never no nor not now of off often on once only or other others otherwise
our ours ourselves out over own perhaps rather same several shall she should
since so some still such than that the their theirs them themselves then there
therefore these they this those though through thus to together too toward
under until upon us very was we were what whatever when where whether which
while who whom whose why will with within without would yet you your yours
yourself yourselves
""".split())

class StopWords:
    """Case-insensitive stop-word membership."""

    def __init__(self, words: Iterable[str] = ()):
        self.words: FrozenSet[str] = frozenset(w.strip().lower() for w in words if w and w.strip())

    def __contains__(self, word: str) -> bool:
        return self.is_stop_word(word)

    def __len__(self) -> int:
        return len(self.words)

    def is_stop_word(self, word: str) -> bool:
        return word.strip().lower() in self.words

    @classmethod
    def default(cls) -> "StopWords":
        return cls(DEFAULT_STOP_WORDS)

    @classmethod
    def from_file(cls, path: Path) -> "StopWords":
        words = []
        for line in Path(path).read_text(encoding="utf-8").splitlines():
            line = line.split("#", 1)[0].strip()
            if line:
                words.append(line)
        return cls(words)

    @classmethod
    def nltk(cls, language: str = "english") -> "StopWords":
        # LookupError propagates when the corpus isn't installed
        from nltk.corpus import stopwords
        return cls(stopwords.words(language))


# --- stemmer ---

class SnowballStemmer:
    def __init__(self, language: str = "english"):
        self.language = language
        self._stemmer = _NltkSnowball(language)

    def stem(self, word: str) -> str:
        return self._stemmer.stem(word)


# --- sentence detection ---

class PunktDetector:
    """nltk Punkt sentence splitter backed by the installed punkt_tab data."""

    def __init__(self, language: str = "english"):
        from nltk.tokenize.punkt import PunktTokenizer
        # raises LookupError if punkt_tab/<language> is missing
        self._punkt = PunktTokenizer(language)
        self.language = language

    def detect(self, text: str) -> List[str]:
        return self._punkt.tokenize(text)
