# Pydantic models for API IO.

from __future__ import annotations
from pydantic import BaseModel, Field, field_validator
from typing import List
from .config import WORD_LENGTH

class AddWordsRequest(BaseModel):
    words: List[str] = Field(..., min_length=1, description="Words to add to the dictionary")

class RemoveWordRequest(BaseModel):
    word: str = Field(..., description="Word to delete from the dictionary")

class GuessRequest(BaseModel):
    guess: str = Field(..., description="5-letter guess")

    @field_validator("guess")
    @classmethod
    def validate_guess(cls, v: str) -> str:
        w = v.lower()
        if len(w) != WORD_LENGTH:
            raise ValueError(f"guess must be {WORD_LENGTH} letters long")
        return w

class WordResponse(BaseModel):
    word: str

class GuessResponse(BaseModel):
    # One of 'c' (correct), 'p' (present) or 'w' (wrong) per position.
    result: str

class DictionaryStats(BaseModel):
    count: int
