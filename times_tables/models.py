from enum import Enum
from pydantic import BaseModel
from typing import List, Optional

class Difficulty(str, Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"

class FeedbackColor(str, Enum):
    neutral = "neutral"
    success = "success"
    failure = "failure"

class AnswerOutcome(str, Enum):
    correct = "correct"
    incorrect = "incorrect"

class KeypadButtonKind(str, Enum):
    number = "number"
    delete = "delete"
    enter = "enter"

class KeypadButton(BaseModel):
    kind: KeypadButtonKind
    digit: Optional[str] = None

    @classmethod
    def number(cls, digit: str) -> "KeypadButton":
        return cls(kind=KeypadButtonKind.number, digit=digit)

    @classmethod
    def from_label(cls, value: str) -> "KeypadButton":
        """Accepts a digit character or the names "delete" / "enter"."""
        name = (value or "").strip().lower()
        if name == KeypadButtonKind.delete.value:
            return cls(kind=KeypadButtonKind.delete)
        if name == KeypadButtonKind.enter.value:
            return cls(kind=KeypadButtonKind.enter)
        return cls.number(value)

    @property
    def label(self) -> str:
        return self.digit if self.kind == KeypadButtonKind.number else self.kind.value

class CompletionMessage(BaseModel):
    title: str
    body: str
    action: str

class GameSnapshot(BaseModel):
    num1: int
    num2: int
    buffer: str
    display_answer: str
    feedback_text: str
    feedback_color: FeedbackColor
    score: str
    num_correct: int
    num_questions: int
    difficulty: Difficulty
    lower_bound: int
    upper_bound: int
    session_complete: bool
    color1: str
    color2: str
    color_x: str
    completion: Optional[CompletionMessage] = None

class DigitRequest(BaseModel):
    digit: str

class PressRequest(BaseModel):
    button: str

class DifficultyRequest(BaseModel):
    difficulty: str

class SubmitResponse(BaseModel):
    outcome: Optional[AnswerOutcome] = None
    game: GameSnapshot

class KeypadLayoutResponse(BaseModel):
    rows: List[List[str]]
