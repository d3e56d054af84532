import os
import logging
from logging.handlers import RotatingFileHandler

import config

# --- LOGGING SETUP ---

def setup_logging() -> logging.Logger:
    """Configure structured logging with rotation"""
    logger = logging.getLogger("id_obfuscator")
    logger.setLevel(config.LOG_LEVEL)

    if not logger.handlers:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(config.LOG_LEVEL)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if config.LOG_TO_FILE:
            os.makedirs(config.LOG_DIR, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(config.LOG_DIR, "app.log"),
                maxBytes=10_485_760,
                backupCount=5
            )
            file_handler.setLevel(config.LOG_LEVEL)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger

logger = setup_logging()

# --- CUSTOM EXCEPTIONS ---

class ObfuscationError(Exception):
    """Base class for every error the obfuscation engine reports to a caller."""
    code = "ObfuscationError"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

class EmptyInput(ObfuscationError):
    code = "EmptyInput"

    def __init__(self, detail: str = "Input cannot be empty"):
        super().__init__(detail)

class InvalidNumericInput(ObfuscationError):
    code = "InvalidNumericInput"

    def __init__(self, value: str):
        super().__init__(f"Input must be a decimal number: {value!r}")
        self.value = value

class InvalidCiphertext(ObfuscationError):
    code = "InvalidCiphertext"

    def __init__(self, detail: str = "Invalid obfuscated string"):
        super().__init__(detail)

class LengthTooShort(ObfuscationError):
    code = "LengthTooShort"

    def __init__(self, min_length: int, after_prefix: bool = False):
        where = " after removing the prefix" if after_prefix else ""
        super().__init__(f"Invalid obfuscated string: too short{where}, at least {min_length} characters required")
        self.min_length = min_length

class ConfigurationError(ObfuscationError):
    code = "ConfigurationError"
