from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

WordListStatus = Literal['not-loaded', 'loading', 'processing', 'loaded', 'failed']

class WordListReference(BaseModel):
    id: str
    name: str
    path: str

class WordListState(BaseModel):
    reference: WordListReference
    status: WordListStatus = 'not-loaded'
    wordCount: Optional[int] = None
    acceptedCount: Optional[int] = None

class WordListsView(BaseModel):
    wordLists: List[WordListState] = []
    selectedId: Optional[str] = None
    desiredId: Optional[str] = None

class PuzzleRequest(BaseModel):
    # Free text; anything outside a-z is dropped before solving
    required: str = Field(..., min_length=1)
    optional: str = ''

class Solution(BaseModel):
    word: str
    score: int = 1
    isBingo: bool = False

class SolveResult(BaseModel):
    required: str
    optional: str
    solutions: List[Solution] = []
    count: int = 0
    totalScore: int = 0

class PuzzleSummary(BaseModel):
    required: str
    optional: str

LetterCountVerdict = Literal['below-pot', 'full-pot', 'above-pot']

class WordInspection(BaseModel):
    word: str
    inWordList: bool
    validInPuzzle: bool = False
    outsideAlphabet: bool = False
    length: int = 0
    tooShort: bool = False
    distinctLetters: Optional[int] = None
    letterCount: Optional[LetterCountVerdict] = None

class GeneratedPuzzle(BaseModel):
    required: str
    optional: str
    maxScore: int
    solutionCount: int
    accessibility: float
