from __future__ import annotations
from typing import Iterable, List, Optional, Set, Union
import logging
import re

from .model import SentenceModel
from .nlp import Tokenizer
from .utils import compile_sentence_pattern

log = logging.getLogger(__name__)

SENTENCE_REGEX = r"(?<=[.!?])\s+"
SENTENCE_SPLIT = compile_sentence_pattern(SENTENCE_REGEX)

def split_sentences(text: str, pattern: re.Pattern = SENTENCE_SPLIT) -> List[str]:
    """
    Split on `pattern`. When at least one split happens, trailing empty
    pieces are dropped; text without a delimiter comes back whole.
    """
    parts = pattern.split(text)
    if len(parts) > 1:
        while parts and parts[-1] == "":
            parts.pop()
    return parts

def _filter(raw: Iterable[str], tokenizer: Tokenizer, minimum_words: int) -> Set[str]:
    out: Set[str] = set()
    for sentence in raw:
        if len(tokenizer.tokenize(sentence)) >= minimum_words:
            out.add(sentence)
    return out

def parse_sentences_regex(
    text: str,
    tokenizer: Tokenizer,
    minimum_words: int,
    pattern: re.Pattern = SENTENCE_SPLIT,
) -> Set[str]:
    return _filter(split_sentences(text, pattern), tokenizer, minimum_words)

def parse_sentences_model(
    text: str,
    tokenizer: Tokenizer,
    minimum_words: int,
    model: SentenceModel,
) -> Set[str]:
    if not model.available:
        raise ValueError("sentence model is not loaded")
    return _filter(model.detector.detect(text), tokenizer, minimum_words)

def parse_sentences(
    text: str,
    tokenizer: Tokenizer,
    minimum_words: int,
    model: Optional[SentenceModel] = None,
    pattern: re.Pattern = SENTENCE_SPLIT,
) -> Set[str]:
    """Candidate sentences with at least `minimum_words` tokens, deduplicated."""
    if model is not None and model.available:
        return parse_sentences_model(text, tokenizer, minimum_words, model)
    return parse_sentences_regex(text, tokenizer, minimum_words, pattern)


class SentenceExtractor:
    """
    Sentence extraction bound to a model handle. The strategy is fixed
    for the extractor's lifetime: the model when present, else `pattern`.
    """

    def __init__(
        self,
        model: SentenceModel,
        tokenizer: Tokenizer,
        pattern: Union[str, re.Pattern] = SENTENCE_SPLIT,
    ):
        self.model = model
        self.tokenizer = tokenizer
        self.pattern = compile_sentence_pattern(pattern) if isinstance(pattern, str) else pattern

    @property
    def strategy(self) -> str:
        return self.model.source if self.model.available else "regex"

    def extract(self, text: str, minimum_words: int) -> Set[str]:
        sentences = parse_sentences(text, self.tokenizer, minimum_words, self.model, self.pattern)
        log.debug("%s strategy kept %d sentences", self.strategy, len(sentences))
        return sentences
