# trivia/session.py - Quiz round state: current question, score and summary

import logging
from typing import List, Optional, Union

from trivia.errors import QuizStateError
from trivia.models import Difficulty, QuestionType, TriviaQuestion
from trivia.providers.base import QuestionProvider

logger = logging.getLogger(__name__)


class QuizSession:
    """
    One quiz round played against a question provider.

    Every call to ``start()`` begins a new generation. A fetch that completes
    after a newer ``start()`` has begun is stale: its questions or its error
    are dropped and ``start()`` returns False.
    """

    def __init__(self, provider: QuestionProvider,
                 amount: Optional[int] = None,
                 category_id: Optional[int] = None,
                 difficulty: Optional[Union[Difficulty, str]] = None,
                 question_type: Optional[Union[QuestionType, str]] = None):
        self.provider = provider
        self.amount = amount
        self.category_id = category_id
        self.difficulty = difficulty
        self.question_type = question_type

        self.questions: List[TriviaQuestion] = []
        self.current_index = 0
        self.correct_count = 0
        self.is_loading = False

        self._generation = 0
        self._current_answers: Optional[List[str]] = None

    @property
    def generation(self) -> int:
        return self._generation

    async def start(self) -> bool:
        """Fetch a new set of questions and reset the score"""
        self._generation += 1
        generation = self._generation
        self.is_loading = True

        try:
            questions = await self.provider.fetch_questions(
                amount=self.amount,
                category_id=self.category_id,
                difficulty=self.difficulty,
                question_type=self.question_type,
            )
        except Exception:
            if generation != self._generation:
                logger.debug(f"Ignoring failure from stale fetch (generation {generation})")
                return False
            self.is_loading = False
            raise

        if generation != self._generation:
            logger.debug(f"Discarding stale fetch (generation {generation}, current {self._generation})")
            return False

        self.is_loading = False
        self.questions = questions
        self.current_index = 0
        self.correct_count = 0
        self._current_answers = None
        logger.info(f"Quiz started with {len(questions)} questions")
        return True

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def score(self) -> int:
        return self.correct_count

    @property
    def is_finished(self) -> bool:
        return bool(self.questions) and self.current_index >= len(self.questions)

    @property
    def current_question(self) -> Optional[TriviaQuestion]:
        if self.is_loading or self.current_index >= len(self.questions):
            return None
        return self.questions[self.current_index]

    @property
    def current_answers(self) -> List[str]:
        """Answer choices for the current question, shuffled once per question"""
        question = self.current_question
        if question is None:
            return []
        if self._current_answers is None:
            self._current_answers = question.all_answers_shuffled
        return self._current_answers

    @property
    def progress_label(self) -> str:
        number = min(self.current_index + 1, self.total)
        return f"Question: {number}/{self.total}"

    def submit_answer(self, answer: str) -> bool:
        """Score the answer to the current question and move on"""
        if self.is_loading:
            raise QuizStateError("Questions are still loading")
        question = self.current_question
        if question is None:
            raise QuizStateError("No question to answer")

        is_correct = question.is_correct(answer)
        if is_correct:
            self.correct_count += 1

        self.current_index += 1
        self._current_answers = None
        return is_correct

    @property
    def summary(self) -> str:
        return f"Final score: {self.correct_count}/{self.total}"
