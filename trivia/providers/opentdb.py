# trivia/providers/opentdb.py - Open Trivia DB question provider

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional, Union

import aiohttp
from yarl import URL

from trivia.errors import (
    BadRequestURL,
    DecodingError,
    EmptyResults,
    NetworkError,
    NonZeroResponseCode,
    TriviaAPIError,
)
from trivia.html_decode import html_decoded
from trivia.models import (
    Difficulty,
    QuestionType,
    RawQuestion,
    RawQuestionEnvelope,
    TriviaQuestion,
)
from trivia.providers.base import QuestionProvider
from trivia.settings import TriviaSettings

logger = logging.getLogger(__name__)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def build_request_url(
    base_url: str,
    amount: int,
    category_id: Optional[int] = None,
    difficulty: Optional[Union[Difficulty, str]] = None,
    question_type: Optional[Union[QuestionType, str]] = None,
) -> URL:
    """Append the query parameters to the base endpoint, or raise BadRequestURL"""
    try:
        url = URL(base_url)
    except (TypeError, ValueError) as e:
        raise BadRequestURL(f"Could not build request URL: {e}") from e

    if not url.is_absolute() or url.scheme not in ("http", "https") or not url.host:
        raise BadRequestURL(f"Could not build request URL: {base_url!r} is not an http(s) endpoint")

    if not _is_positive_int(amount):
        raise BadRequestURL(f"Could not build request URL: amount must be a positive integer, got {amount!r}")

    params: Dict[str, Union[str, int]] = {"amount": amount}

    if category_id is not None:
        if not _is_positive_int(category_id):
            raise BadRequestURL(f"Could not build request URL: invalid category {category_id!r}")
        params["category"] = category_id

    try:
        if difficulty is not None:
            params["difficulty"] = Difficulty(difficulty).value
        if question_type is not None:
            params["type"] = QuestionType(question_type).value
    except ValueError as e:
        raise BadRequestURL(f"Could not build request URL: {e}") from e

    return url.update_query(params)


def parse_envelope(body: Optional[bytes]) -> RawQuestionEnvelope:
    """Decode a response body into the provider envelope"""
    if not body:
        raise EmptyResults()

    try:
        data = json.loads(body)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError both land here
        raise DecodingError(e) from e

    return RawQuestionEnvelope.from_dict(data)


def convert_question(raw: RawQuestion) -> TriviaQuestion:
    """Decode every text field of a wire record independently"""
    correct = html_decoded(raw.correct_answer)
    incorrect = [html_decoded(answer) for answer in raw.incorrect_answers]

    if correct in incorrect:
        logger.warning(f"Dropping distractor identical to the correct answer: {correct!r}")
        incorrect = [answer for answer in incorrect if answer != correct]

    return TriviaQuestion(
        category=html_decoded(raw.category),
        question=html_decoded(raw.question),
        correct_answer=correct,
        incorrect_answers=incorrect,
        difficulty=raw.difficulty,
        type=raw.type,
    )


class OpenTDBProvider(QuestionProvider):
    """Provider for Open Trivia Database (opentdb.com)"""

    def __init__(
        self,
        settings: Optional[TriviaSettings] = None,
        base_url: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.settings = settings or TriviaSettings()
        self.base_url = base_url or self.settings.base_url

        # An injected session belongs to the caller and is never closed here
        self._session = session
        self._owns_session = session is None

        self._requests = 0
        self._failures = 0
        self._last_error: Optional[str] = None

    @property
    def name(self) -> str:
        return "Open Trivia DB"

    @property
    def is_available(self) -> bool:
        return self._session is not None and not self._session.closed

    async def initialize(self) -> None:
        """Create HTTP session for API calls"""
        if not self._owns_session:
            return
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=5,
                limit_per_host=2,
                ttl_dns_cache=300,
                use_dns_cache=True
            )
            timeout = aiohttp.ClientTimeout(
                total=self.settings.timeout,
                connect=self.settings.connect_timeout,
            )
            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=timeout,
                headers={'User-Agent': self.settings.user_agent}
            )
            logger.info("OpenTDB provider session created")

    async def cleanup(self) -> None:
        """Close HTTP session"""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            logger.info("OpenTDB provider session closed")

    async def fetch_questions(
        self,
        amount: Optional[int] = None,
        category_id: Optional[int] = None,
        difficulty: Optional[Union[Difficulty, str]] = None,
        question_type: Optional[Union[QuestionType, str]] = None,
    ) -> List[TriviaQuestion]:
        """Fetch, validate and decode one batch of questions from OpenTDB"""
        if amount is None:
            amount = self.settings.default_amount

        try:
            url = build_request_url(self.base_url, amount, category_id, difficulty, question_type)

            if self._session is None or self._session.closed:
                await self.initialize()
            if self._session is None or self._session.closed:
                # Injected sessions are never reopened here
                logger.error("HTTP session is closed, cannot fetch questions")
                raise NetworkError(RuntimeError("Session is closed"))

            logger.info(
                f"Fetching {amount} questions (category={category_id or 'any'}, "
                f"difficulty={difficulty or 'any'}, type={question_type or 'any'})"
            )
            body = await self._get_body(url)
            envelope = parse_envelope(body)

            if not envelope.is_success:
                logger.warning(f"API returned error code: {envelope.response_code}")
                raise NonZeroResponseCode(envelope.response_code)

            questions = [convert_question(raw) for raw in envelope.results]
            if not questions:
                raise EmptyResults()

        except TriviaAPIError as e:
            self._failures += 1
            self._last_error = str(e)
            raise

        logger.info(f"Fetched {len(questions)} questions")
        return questions

    async def _get_body(self, url: URL) -> bytes:
        """Issue the GET and return the raw body"""
        self._requests += 1
        try:
            async with self._session.get(url) as resp:
                if resp.status != 200:
                    logger.warning(f"HTTP {resp.status} from OpenTDB, reading body anyway")
                try:
                    return await resp.read()
                except aiohttp.ClientPayloadError as e:
                    logger.warning(f"Could not read response body: {e}")
                    raise EmptyResults() from e
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            logger.error(f"Error fetching questions: {e!r}")
            raise NetworkError(e) from e

    def get_statistics(self) -> Dict[str, Any]:
        """Get provider statistics"""
        stats = super().get_statistics()
        stats.update({
            "available": self.is_available,
            "base_url": self.base_url,
            "requests": self._requests,
            "failures": self._failures,
            "last_error": self._last_error,
        })
        return stats
