# trivia/providers/__init__.py - Question sources

from trivia.providers.base import QuestionProvider
from trivia.providers.opentdb import OpenTDBProvider

__all__ = [
    "QuestionProvider",
    "OpenTDBProvider",
]
