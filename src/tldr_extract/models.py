from pydantic import BaseModel
from typing import List

class KeywordDTO(BaseModel):
    keyword: str
    frequency: int

class KeywordReport(BaseModel):
    source: str
    max_count: int
    min_occurrences: int
    keywords: List[KeywordDTO]

class SentenceReport(BaseModel):
    source: str
    min_words: int
    sentences: List[str]
