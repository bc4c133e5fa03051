from __future__ import annotations
from typing import List, Tuple
import re

# (source, replacement), applied in order; sources are disjoint
TYPOGRAPHIC_REPLACEMENTS: List[Tuple[str, str]] = [
    ("\u2018", "'"),
    ("\u2019", "'"),
    ("\u201c", '"'),
    ("\u201b", "'"),
    ("\u201d", '"'),
    ("\u2026", "-"),
    ("\u2013", "-"),
    ("\u2014", "-"),
    ("&#8211;", "-"),
    ("&#8220;", '"'),
    ("&#8221;", '"'),
    ("&#8216;", "'"),
    ("&#8217;", "'"),
    ("&#8219;", "'"),
    ("&#039;", "'"),
    ("&#8230;", "..."),
    ("&#8212;", "-"),
]

# abbreviations whose dots would otherwise end a sentence
ABBREVIATION_REPLACEMENTS: List[Tuple[str, str]] = [
    ("U.S.", "US"),
    ("U.K.", "UK"),
    ("Mass.", "Massachusetts"),
    ("Mr.", "Mr"),
]

def _replace_all(text: str, table: List[Tuple[str, str]]) -> str:
    for src, dst in table:
        text = text.replace(src, dst)
    return text

def fold_typographic_punctuation(text: str) -> str:
    """Fold smart quotes, dashes, ellipses and their numeric HTML entities to ASCII."""
    return _replace_all(text, TYPOGRAPHIC_REPLACEMENTS)

def correct_abbreviation_dots(text: str) -> str:
    """
    Literal, case-sensitive replacement of a few dotted abbreviations
    ("U.S." -> "US", ...) so a regex sentence splitter does not cut on them.
    No word-boundary checks are made.
    """
    return _replace_all(text, ABBREVIATION_REPLACEMENTS)

def compile_sentence_pattern(pattern: str) -> re.Pattern:
    compiled = re.compile(pattern)
    if compiled.groups:
        # capture groups would leak delimiters into the candidate list
        raise ValueError(f"sentence pattern must not contain capture groups: {pattern!r}")
    return compiled
