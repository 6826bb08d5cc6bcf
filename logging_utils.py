# logging_utils.py
"""
Logging setup for the trivia quiz: rotating file log plus console output
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional


class LoggingConfig:
    """Logging settings read from an optional config module"""

    def __init__(self, config_module=None):
        self.config = config_module

        self.log_level = self._get_config_value('LOG_LEVEL', logging.WARNING)
        self.max_bytes = self._get_config_value('MAX_LOG_SIZE', 1024*1024)  # 1MB
        self.backup_count = self._get_config_value('LOG_BACKUP_COUNT', 3)
        self.logs_dir = self._get_config_value('LOGS_DIR', 'logs')
        self.log_file = self._get_config_value('LOG_FILE', 'trivia.log')

        self.enable_file_logging = self._get_config_value('ENABLE_FILE_LOGGING', True)
        self.enable_console_logging = self._get_config_value('ENABLE_CONSOLE_LOGGING', True)
        self.detailed_file_logs = self._get_config_value('DETAILED_FILE_LOGS', True)

        # Quiet noisy libraries
        self.third_party_levels = {
            'aiohttp': self._get_config_value('AIOHTTP_LOG_LEVEL', logging.WARNING),
            'asyncio': self._get_config_value('ASYNCIO_LOG_LEVEL', logging.WARNING),
        }

    def _get_config_value(self, key: str, default):
        """Get configuration value with fallback to default"""
        if self.config and hasattr(self.config, key):
            return getattr(self.config, key)
        return default


class EnhancedLogger:
    """Configures the root logger once per process"""

    def __init__(self, config_module=None):
        self.config = LoggingConfig(config_module)
        self.logger = None
        self._setup_complete = False

    def setup_logging(self) -> logging.Logger:
        if self._setup_complete:
            return self.logger

        if self.config.enable_file_logging:
            os.makedirs(self.config.logs_dir, exist_ok=True)

        handlers = []

        if self.config.enable_file_logging:
            file_handler = self._create_file_handler(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
            ))
            if file_handler:
                handlers.append(file_handler)

        # Console output stays terse so it doesn't drown the quiz prompts
        if self.config.enable_console_logging:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))
            console_handler.setLevel(self.config.log_level)
            handlers.append(console_handler)

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        root_logger.handlers.clear()
        for handler in handlers:
            root_logger.addHandler(handler)

        for logger_name, level in self.config.third_party_levels.items():
            logging.getLogger(logger_name).setLevel(level)

        self.logger = logging.getLogger("trivia")
        self._setup_complete = True
        return self.logger

    def _create_file_handler(self, formatter) -> Optional[RotatingFileHandler]:
        """Create file handler with rotation"""
        try:
            log_path = os.path.join(self.config.logs_dir, self.config.log_file)

            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=self.config.max_bytes,
                backupCount=self.config.backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.DEBUG if self.config.detailed_file_logs else self.config.log_level)
            return file_handler

        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}")
            return None

    def cleanup(self):
        """Close and detach all root handlers"""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
        self._setup_complete = False


def setup_logging(config_module=None) -> logging.Logger:
    """Setup logging and return the trivia logger"""
    enhanced_logger = EnhancedLogger(config_module)
    return enhanced_logger.setup_logging()
