"""
Statistical sentence-boundary model handle.

The model is loaded at most once by whoever owns the process (the CLI,
or `default_sentence_model()` for library callers). Its outcome, a
detector or nothing, is frozen into a `SentenceModel` and handed to the
extractor; when absent, sentences are split with the regex fallback.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional
import logging

from .nlp import PunktDetector, SentenceDetector

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class SentenceModel:
    detector: Optional[SentenceDetector] = None
    source: str = "regex"

    @property
    def available(self) -> bool:
        return self.detector is not None

    @staticmethod
    def absent() -> "SentenceModel":
        return SentenceModel(None, "regex")

def load_sentence_model(
    language: str = "english",
    factory: Callable[[str], SentenceDetector] = PunktDetector,
) -> SentenceModel:
    """
    Try once to load the sentence-boundary model for `language`.
    Failure is logged and yields an absent handle; it is never raised.
    """
    try:
        detector = factory(language)
    except (LookupError, OSError, ValueError) as ex:
        log.warning(
            "Failed to load sentence model for %r (%s). Falling back to regex sentence parsing",
            language, ex,
        )
        return SentenceModel.absent()
    log.info("Sentence model loaded (punkt/%s)", language)
    return SentenceModel(detector, f"punkt/{language}")

@lru_cache(maxsize=None)
def default_sentence_model(language: str = "english") -> SentenceModel:
    return load_sentence_model(language)
