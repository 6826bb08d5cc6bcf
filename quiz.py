#!/usr/bin/env python3
"""
Terminal trivia quiz

Plays rounds of Open Trivia DB questions in the terminal.

Usage:
    python quiz.py [--amount 5] [--category "Science"] [--difficulty easy] [--type multiple]
    python quiz.py --list-categories
"""

import argparse
import asyncio
import logging
import sys
from typing import Callable, Optional, Sequence

from logging_utils import setup_logging
from trivia.categories import find_category_id, list_categories
from trivia.errors import TriviaAPIError
from trivia.models import Difficulty, QuestionType
from trivia.providers.opentdb import OpenTDBProvider
from trivia.session import QuizSession
from trivia.settings import load_settings

logger = logging.getLogger(__name__)


class QuizRunner:
    """Drives a QuizSession through terminal prompts"""

    def __init__(self, session: QuizSession,
                 input_func: Callable[[str], str] = input,
                 print_func: Callable[..., None] = print):
        self.session = session
        self._input = input_func
        self._print = print_func

    async def play(self) -> None:
        """Play rounds until the player declines a new game"""
        while True:
            if not await self._load_questions():
                return
            self._play_round()
            if not self._ask_yes_no("Fetch new game? [Y/n] "):
                return

    async def _load_questions(self) -> bool:
        while True:
            self._print("Loading questions…")
            try:
                await self.session.start()
                return True
            except TriviaAPIError as e:
                logger.warning(f"Could not load questions: {e}")
                self._print(f"Oops: {e}")
                if not self._ask_yes_no("Retry? [Y/n] "):
                    return False

    def _play_round(self) -> None:
        while not self.session.is_finished:
            question = self.session.current_question
            answers = self.session.current_answers

            self._print()
            self._print(self.session.progress_label)
            self._print(f"[{question.category}]")
            self._print(question.question)
            for number, answer in enumerate(answers, start=1):
                self._print(f"  {number}. {answer}")

            choice = self._ask_choice(len(answers))
            if self.session.submit_answer(answers[choice - 1]):
                self._print("Correct!")
            else:
                self._print(f"Wrong! The answer was: {question.correct_answer}")

        self._print()
        self._print("Game over!")
        self._print(self.session.summary)

    def _ask_choice(self, count: int) -> int:
        while True:
            raw = self._input(f"Your answer (1-{count}): ").strip()
            if raw.isdigit() and 1 <= int(raw) <= count:
                return int(raw)
            self._print(f"Please enter a number between 1 and {count}.")

    def _ask_yes_no(self, prompt: str) -> bool:
        return self._input(prompt).strip().lower() in ("", "y", "yes")


def _load_config_module():
    try:
        import config
        return config
    except ImportError:
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Open Trivia DB quizzes in the terminal")
    parser.add_argument("--amount", type=int, default=None,
                        help="number of questions per round")
    parser.add_argument("--category", default=None,
                        help="category id or name (see --list-categories)")
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=None)
    parser.add_argument("--type", dest="question_type",
                        choices=[t.value for t in QuestionType], default=None)
    parser.add_argument("--list-categories", action="store_true",
                        help="print the available categories and exit")
    return parser


async def run(args: argparse.Namespace, category_id: Optional[int]) -> None:
    settings = load_settings()
    async with OpenTDBProvider(settings) as provider:
        session = QuizSession(
            provider,
            amount=args.amount,
            category_id=category_id,
            difficulty=args.difficulty,
            question_type=args.question_type,
        )
        await QuizRunner(session).play()
        logger.info(f"Provider statistics: {provider.get_statistics()}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_categories:
        for category in list_categories():
            print(f"{category.category_id:>3}  {category.name}")
        return 0

    if args.amount is not None and args.amount < 1:
        parser.error("--amount must be at least 1")

    category_id = None
    if args.category is not None:
        category_id = find_category_id(args.category)
        if category_id is None:
            parser.error(f"unknown category: {args.category!r}")

    setup_logging(_load_config_module())

    try:
        asyncio.run(run(args, category_id))
    except (KeyboardInterrupt, EOFError):
        print("\nBye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
