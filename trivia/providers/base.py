# trivia/providers/base.py - Abstract base class for question providers

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from trivia.models import Difficulty, QuestionType, TriviaQuestion


class QuestionProvider(ABC):
    """Abstract base class for trivia question sources"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name"""
        pass

    @abstractmethod
    async def fetch_questions(
        self,
        amount: Optional[int] = None,
        category_id: Optional[int] = None,
        difficulty: Optional[Union[Difficulty, str]] = None,
        question_type: Optional[Union[QuestionType, str]] = None,
    ) -> List[TriviaQuestion]:
        """
        Fetch a batch of decoded questions.

        Args:
            amount: number of questions, provider default when omitted
            category_id: provider category id, any category when omitted
            difficulty: easy, medium or hard, any when omitted
            question_type: multiple or boolean, both when omitted

        Returns:
            Non-empty list of questions in provider order

        Raises:
            TriviaAPIError: on any failure
        """
        pass

    async def initialize(self) -> None:
        """Optional initialization (e.g., create HTTP session)"""
        pass

    async def cleanup(self) -> None:
        """Optional cleanup (e.g., close HTTP session)"""
        pass

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.cleanup()

    def get_statistics(self) -> Dict[str, Any]:
        """Get provider-specific statistics"""
        return {"name": self.name}
