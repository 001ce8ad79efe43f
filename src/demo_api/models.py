from typing import List

from pydantic import BaseModel, Field


class CrackRequest(BaseModel):
    text: str
    top: int = Field(default=5, ge=1, le=26)


class Candidate(BaseModel):
    shift: int
    score: float


class CrackResponse(BaseModel):
    best: Candidate
    ranked: List[Candidate]
    plaintext: str


class ShiftRequest(BaseModel):
    text: str
    shift: int


class TextResponse(BaseModel):
    text: str
