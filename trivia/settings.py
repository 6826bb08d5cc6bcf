"""
Trivia configuration

Values come from the optional top-level ``config`` module (``TRIVIA_CONFIG``
dict); anything missing falls back to the defaults below.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://opentdb.com/api.php"
DEFAULT_AMOUNT = 5


@dataclass
class TriviaSettings:
    base_url: str = DEFAULT_BASE_URL
    default_amount: int = DEFAULT_AMOUNT
    timeout: float = 15.0
    connect_timeout: float = 5.0
    user_agent: str = "TriviaQuiz/1.0"

    @classmethod
    def from_mapping(cls, trivia_config: Dict[str, Any]) -> "TriviaSettings":
        """Build settings from a TRIVIA_CONFIG-shaped dict"""
        http = trivia_config.get("http", {})
        return cls(
            base_url=trivia_config.get("base_url", DEFAULT_BASE_URL),
            default_amount=int(trivia_config.get("default_amount", DEFAULT_AMOUNT)),
            timeout=float(http.get("timeout", 15.0)),
            connect_timeout=float(http.get("connect_timeout", 5.0)),
            user_agent=http.get("user_agent", "TriviaQuiz/1.0"),
        )


def load_settings(config_module=None) -> TriviaSettings:
    """Load settings from the given module, or from ``config`` if importable"""
    try:
        if config_module is None:
            import config as config_module
        return TriviaSettings.from_mapping(config_module.TRIVIA_CONFIG)
    except (ImportError, AttributeError, KeyError) as e:
        logger.debug(f"No trivia config found, using defaults: {e}")
        return TriviaSettings()
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid trivia config, using defaults: {e}")
        return TriviaSettings()
