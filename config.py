import os
from functools import lru_cache

# ============================================================================
# HELPERS
# ============================================================================

def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")

# ============================================================================
# CONFIGURATION CLASS
# ============================================================================

class Config:
    """Centralized configuration with validation"""
    APP_TITLE: str = "ID Obfuscator"

    # Startup state of the active configuration
    DEFAULT_PROFILE: str = os.getenv("DEFAULT_PROFILE", "general")
    PREFIX_ENABLED: bool = _env_flag("PREFIX_ENABLED", "true")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE: bool = _env_flag("LOG_TO_FILE", "true")
    LOG_DIR: str = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "logs"))

    # Rate limiting
    RATE_LIMIT_SINGLE: str = os.getenv("RATE_LIMIT_SINGLE", "120/minute")
    RATE_LIMIT_BATCH: str = os.getenv("RATE_LIMIT_BATCH", "30/minute")

    # Request limits
    MAX_INPUT_LENGTH: int = int(os.getenv("MAX_INPUT_LENGTH", "1000000"))

    @classmethod
    def validate(cls):
        """Validate configuration on startup"""
        # Imported here, profiles imports config through core_logic
        from profiles import PROFILE_NAMES

        if cls.DEFAULT_PROFILE not in PROFILE_NAMES:
            raise ValueError(f"DEFAULT_PROFILE must be one of: {PROFILE_NAMES}")
        if cls.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL is not a valid level: {cls.LOG_LEVEL}")
        if cls.MAX_INPUT_LENGTH < 1:
            raise ValueError("MAX_INPUT_LENGTH must be positive")

# ============================================================================
# SINGLETON INSTANCE
# ============================================================================

config = Config()

# --- Expose class attributes as module constants for convenience ---
for attr in [a for a in dir(config) if not a.startswith('__') and not callable(getattr(config, a))]:
    globals()[attr] = getattr(config, attr)


@lru_cache()
def get_settings() -> Config:
    """Returns the process configuration; usable as a FastAPI dependency."""
    return config
