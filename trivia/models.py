# trivia/models.py - Question entities and provider wire records

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional

from trivia.errors import DecodingError


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionType(Enum):
    MULTIPLE = "multiple"
    BOOLEAN = "boolean"


class ResponseCode(IntEnum):
    """Status codes documented by Open Trivia DB"""
    SUCCESS = 0
    NO_RESULTS = 1
    INVALID_PARAMETER = 2
    TOKEN_NOT_FOUND = 3
    TOKEN_EMPTY = 4
    RATE_LIMIT = 5

    @property
    def description(self) -> str:
        return _RESPONSE_CODE_DESCRIPTIONS[self]


_RESPONSE_CODE_DESCRIPTIONS = {
    ResponseCode.SUCCESS: "Returned results successfully.",
    ResponseCode.NO_RESULTS: "Not enough questions for the requested query.",
    ResponseCode.INVALID_PARAMETER: "The request contained an invalid parameter.",
    ResponseCode.TOKEN_NOT_FOUND: "Session token does not exist.",
    ResponseCode.TOKEN_EMPTY: "Session token has returned all possible questions.",
    ResponseCode.RATE_LIMIT: "Too many requests, only one request per 5 seconds is allowed.",
}


@dataclass
class TriviaQuestion:
    """A decoded question ready to be shown to a player"""
    category: str
    question: str
    correct_answer: str
    incorrect_answers: List[str]

    # Carried from the wire record for display
    difficulty: Optional[str] = None
    type: Optional[str] = None

    @property
    def all_answers_shuffled(self) -> List[str]:
        """Correct answer plus distractors in a fresh random order on every access"""
        answers = [self.correct_answer, *self.incorrect_answers]
        random.shuffle(answers)
        return answers

    def is_correct(self, answer: str) -> bool:
        return answer == self.correct_answer

    def to_dict(self) -> Dict:
        return {
            "category": self.category,
            "question": self.question,
            "correct_answer": self.correct_answer,
            "incorrect_answers": list(self.incorrect_answers),
            "difficulty": self.difficulty,
            "type": self.type,
        }


def _require(data: Dict[str, Any], key: str, kind: type, where: str) -> Any:
    if key not in data:
        raise DecodingError(f"{where}: missing field '{key}'")
    value = data[key]
    # bool is an int subclass but never a valid JSON integer here
    if not isinstance(value, kind) or isinstance(value, bool):
        raise DecodingError(
            f"{where}: field '{key}' expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass
class RawQuestion:
    """One entry of the provider's results array, still HTML-escaped"""
    category: str
    type: str
    difficulty: str
    question: str
    correct_answer: str
    incorrect_answers: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, index: int = 0) -> "RawQuestion":
        where = f"results[{index}]"
        if not isinstance(data, dict):
            raise DecodingError(f"{where}: expected object, got {type(data).__name__}")

        incorrect = _require(data, "incorrect_answers", list, where)
        for i, answer in enumerate(incorrect):
            if not isinstance(answer, str):
                raise DecodingError(
                    f"{where}: incorrect_answers[{i}] expected str, got {type(answer).__name__}"
                )

        return cls(
            category=_require(data, "category", str, where),
            type=_require(data, "type", str, where),
            difficulty=_require(data, "difficulty", str, where),
            question=_require(data, "question", str, where),
            correct_answer=_require(data, "correct_answer", str, where),
            incorrect_answers=list(incorrect),
        )


@dataclass
class RawQuestionEnvelope:
    """Top-level provider response"""
    response_code: int
    results: List[RawQuestion]

    @classmethod
    def from_dict(cls, data: Any) -> "RawQuestionEnvelope":
        if not isinstance(data, dict):
            raise DecodingError(f"envelope: expected object, got {type(data).__name__}")

        code = _require(data, "response_code", int, "envelope")
        results = _require(data, "results", list, "envelope")

        return cls(
            response_code=code,
            results=[RawQuestion.from_dict(item, i) for i, item in enumerate(results)],
        )

    @property
    def is_success(self) -> bool:
        return self.response_code == ResponseCode.SUCCESS
