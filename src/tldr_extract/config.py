from __future__ import annotations
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import json

from .nlp import StopWords, StopWordChecker
from .sentences import SENTENCE_REGEX
from .utils import correct_abbreviation_dots, fold_typographic_punctuation

@dataclass
class ExtractionConfig:
    max_keywords: int = 10
    min_occurrences: int = 2
    min_words_in_sentence: int = 5
    sentence_regex: str = SENTENCE_REGEX
    tokenizer: str = "word"  # "word" | "whitespace"
    language: str = "english"
    stop_words_file: Optional[str] = None
    stop_words_source: str = "builtin"  # "builtin" | "nltk"; ignored when stop_words_file is set
    fold_punctuation: bool = True
    correct_dots: bool = True
    use_sentence_model: bool = True

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ExtractionConfig":
        d = ExtractionConfig()
        return ExtractionConfig(
            max_keywords=int(data.get("max_keywords", d.max_keywords)),
            min_occurrences=int(data.get("min_occurrences", d.min_occurrences)),
            min_words_in_sentence=int(data.get("min_words_in_sentence", d.min_words_in_sentence)),
            sentence_regex=str(data.get("sentence_regex", d.sentence_regex)),
            tokenizer=str(data.get("tokenizer", d.tokenizer)),
            language=str(data.get("language", d.language)),
            stop_words_file=data.get("stop_words_file"),
            stop_words_source=str(data.get("stop_words_source", d.stop_words_source)),
            fold_punctuation=bool(data.get("fold_punctuation", d.fold_punctuation)),
            correct_dots=bool(data.get("correct_dots", d.correct_dots)),
            use_sentence_model=bool(data.get("use_sentence_model", d.use_sentence_model)),
        )

    @staticmethod
    def load(path: Path) -> "ExtractionConfig":
        return ExtractionConfig.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))

    @staticmethod
    def load_json_str(s: str) -> "ExtractionConfig":
        return ExtractionConfig.from_dict(json.loads(s))

    def dump(self) -> str:
        return json.dumps(asdict(self), indent=2)

    def prepare(self, text: str) -> str:
        """Apply the enabled normalisers: punctuation folding, then dot correction."""
        if self.fold_punctuation:
            text = fold_typographic_punctuation(text)
        if self.correct_dots:
            text = correct_abbreviation_dots(text)
        return text

    def stop_words(self) -> StopWordChecker:
        if self.stop_words_file:
            return StopWords.from_file(Path(self.stop_words_file))
        if self.stop_words_source == "nltk":
            return StopWords.nltk(self.language)
        if self.stop_words_source == "builtin":
            return StopWords.default()
        raise ValueError(f"unknown stop_words_source {self.stop_words_source!r} (choose from builtin, nltk)")

def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(ExtractionConfig().dump(), encoding="utf-8")
