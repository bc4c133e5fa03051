"""
Frequency-ranked keyword extraction.

Tokens and their stems must both be longer than MIN_WORD_LENGTH
characters and the stem must not be a stop word. Stems are counted,
ranked by frequency (ties broken by `compare_ranked`) and the most
frequent ones returned as a set.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Dict, List, Optional, Set
import logging

from .nlp import Stemmer, StopWordChecker, Tokenizer

log = logging.getLogger(__name__)

MIN_WORD_LENGTH = 4

@dataclass
class CountedStem:
    stem: str
    frequency: int = 1

    def increment(self) -> int:
        self.frequency += 1
        return self.frequency

    def __str__(self) -> str:
        return f"{self.stem}({self.frequency})"

def is_word(token: Optional[str]) -> bool:
    return token is not None and len(token.strip()) > 0

def _long_word(token: Optional[str]) -> bool:
    return is_word(token) and len(token) > MIN_WORD_LENGTH

def compare_ranked(a: CountedStem, b: CountedStem) -> int:
    """
    Ranking comparator: negative when `a` ranks before `b`.

    Higher frequency first. On equal frequency the stems are compared
    character by character and the *greater* code point ranks first, so
    "ab" comes before "aa". If one stem is a prefix of the other the
    longer one ranks first. This is reverse code-point order, not an
    alphabetical sort, and keyword selection depends on it.
    """
    if a.frequency != b.frequency:
        return -1 if a.frequency > b.frequency else 1
    s1, s2 = a.stem, b.stem
    for c1, c2 in zip(s1, s2):
        if c1 > c2:
            return -1
        if c1 < c2:
            return 1
    if len(s1) > len(s2):
        return -1
    if len(s1) < len(s2):
        return 1
    return 0

def rank_stems(
    text: str,
    tokenizer: Tokenizer,
    stop_words: StopWordChecker,
    stemmer: Stemmer,
) -> List[CountedStem]:
    """
    Count qualifying stems in `text` and return them in rank order.

    Stems differing only in case are counted separately, so the same
    lowercased word may appear more than once.
    """
    counts: Dict[str, CountedStem] = {}  # insertion ordered
    for token in tokenizer.tokenize(text):
        if not _long_word(token):
            continue
        stem = stemmer.stem(token)
        if not _long_word(stem) or stop_words.is_stop_word(stem):
            continue
        # keyed by the raw stem; only the stored word is lowercased
        entry = counts.get(stem)
        if entry is not None:
            entry.increment()
        else:
            counts[stem] = CountedStem(stem.lower())
    return sorted(counts.values(), key=cmp_to_key(compare_ranked))

def most_frequent(
    text: str,
    tokenizer: Tokenizer,
    stop_words: StopWordChecker,
    stemmer: Stemmer,
    max_count: int,
    min_occurrences: int,
) -> Set[str]:
    """
    Return the most frequent stems of `text` occurring at least
    `min_occurrences` times.

    The size check runs before each insertion, so the result may hold
    up to ``max_count + 1`` stems.
    """
    ranked = rank_stems(text, tokenizer, stop_words, stemmer)
    log.debug("ranked %d stems: %s", len(ranked), ", ".join(str(w) for w in ranked[:20]))
    return select_keywords(ranked, max_count, min_occurrences)

def select_keywords(ranked: List[CountedStem], max_count: int, min_occurrences: int) -> Set[str]:
    out: Set[str] = set()
    for entry in ranked:
        if len(out) > max_count:
            break
        if entry.frequency >= min_occurrences:
            out.add(entry.stem)
    return out
