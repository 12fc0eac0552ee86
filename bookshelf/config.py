"""
Runtime configuration read from the environment.

Nothing here runs on import: callers build Settings explicitly and decide
whether to configure logging.
"""

import logging
import os
from dataclasses import dataclass

from bookshelf.domain.value_objects import ValidationRules

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Configuration values, usually loaded with Settings.from_env()."""

    require_genre: bool = False
    """Enforce at least one genre per book (BOOKSHELF_REQUIRE_GENRE)"""

    log_level: str = "INFO"
    """Root log level name (BOOKSHELF_LOG_LEVEL)"""

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            require_genre=_env_flag("BOOKSHELF_REQUIRE_GENRE"),
            log_level=os.getenv("BOOKSHELF_LOG_LEVEL", "INFO").strip().upper(),
        )

    def validation_rules(self) -> ValidationRules:
        """Get the validation rules the book factory should apply."""
        return ValidationRules(require_genre=self.require_genre)


def configure_logging(settings: Settings) -> None:
    """Configure root logging for scripts and applications using the package."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{settings.log_level}'")

    logging.basicConfig(level=level, format=LOG_FORMAT)
