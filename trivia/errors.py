# trivia/errors.py - Failure types for question fetching and quiz sessions

from typing import Optional


class TriviaAPIError(Exception):
    """Base class for every failure of a question fetch"""

    message = "Trivia request failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    @property
    def description(self) -> str:
        return str(self)


class BadRequestURL(TriviaAPIError):
    message = "Could not build request URL."


class NetworkError(TriviaAPIError):
    """No response was received (connectivity, DNS, timeout)"""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Network error: {str(cause) or type(cause).__name__}")


class EmptyResults(TriviaAPIError):
    message = "No questions were returned."


class DecodingError(TriviaAPIError):
    """Response body did not have the expected envelope shape"""

    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"Decoding error: {cause}")


class NonZeroResponseCode(TriviaAPIError):
    """The provider answered but reported a failure status"""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"API returned non-success response_code: {code}")

    @property
    def reason(self) -> Optional[str]:
        from trivia.models import ResponseCode

        try:
            return ResponseCode(self.code).description
        except ValueError:
            return None


class QuizStateError(Exception):
    """A quiz session was used while it could not accept the action"""
