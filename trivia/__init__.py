"""
Trivia Quiz Package

Fetches Open Trivia DB questions, decodes them and runs quiz rounds.
"""

from .errors import (
    BadRequestURL,
    DecodingError,
    EmptyResults,
    NetworkError,
    NonZeroResponseCode,
    QuizStateError,
    TriviaAPIError,
)
from .models import Difficulty, QuestionType, ResponseCode, TriviaQuestion
from .providers import OpenTDBProvider, QuestionProvider
from .session import QuizSession
from .settings import TriviaSettings, load_settings

__all__ = [
    'BadRequestURL',
    'DecodingError',
    'EmptyResults',
    'NetworkError',
    'NonZeroResponseCode',
    'QuizStateError',
    'TriviaAPIError',
    'Difficulty',
    'QuestionType',
    'ResponseCode',
    'TriviaQuestion',
    'OpenTDBProvider',
    'QuestionProvider',
    'QuizSession',
    'TriviaSettings',
    'load_settings',
]
