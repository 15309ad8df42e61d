from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel


class GridRequest(BaseModel):
    # Random letters are drawn when none are supplied
    letters: Optional[str] = None
    size: Optional[int] = None


class ContainsRequest(GridRequest):
    word: str


class SolveResponse(BaseModel):
    size: int
    letters: str
    rows: List[str]
    rendered: str
    words: List[str]
    word_count: int
    processing_time: float
    stage_timings: Dict[str, float]
    counts: Dict[str, int]


class ContainsResponse(BaseModel):
    word: str
    found: bool


class WordCheckResponse(BaseModel):
    word: str
    valid: bool


class WordListResponse(BaseModel):
    words: List[str]
    count: int
