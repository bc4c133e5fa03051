from .keywords import CountedStem, compare_ranked, most_frequent, rank_stems
from .model import SentenceModel, default_sentence_model, load_sentence_model
from .sentences import SentenceExtractor, parse_sentences
from .utils import correct_abbreviation_dots, fold_typographic_punctuation

__version__ = "0.1.0"

__all__ = [
    "CountedStem",
    "SentenceExtractor",
    "SentenceModel",
    "compare_ranked",
    "correct_abbreviation_dots",
    "default_sentence_model",
    "fold_typographic_punctuation",
    "load_sentence_model",
    "most_frequent",
    "parse_sentences",
    "rank_stems",
]
