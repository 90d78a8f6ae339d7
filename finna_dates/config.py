"""
Configuration Module
====================

Loads processing settings from environment variables and the .env file:
the default title enrichment policy, the future-date guard year and the
log level used by the command line tool.
"""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import field_validator
from dotenv import load_dotenv

load_dotenv()

TITLE_YEAR_RANGE_POLICIES = (
    "always",
    "never",
    "no_year_exists",
    "no_match_exists",
    "no_matches_exist",
)


class Settings(BaseSettings):
    """
    Processing settings, loaded automatically from the environment.

    Attributes:
        TITLE_YEAR_RANGE_POLICY: default policy for appending a year range
            to display titles; a record's ``enrichTitleWithYearRange``
            driver parameter overrides it
        CURRENT_YEAR: fixed "now" for the future-date guard; the current
            UTC year is used when unset
        LOG_LEVEL: level name applied by the command line tool
    """
    TITLE_YEAR_RANGE_POLICY: str = "no_match_exists"
    CURRENT_YEAR: Optional[int] = None
    LOG_LEVEL: str = "INFO"

    @field_validator("TITLE_YEAR_RANGE_POLICY")
    @classmethod
    def validate_policy(cls, v: str) -> str:
        """
        Check that the policy is one of the known title enrichment policies.
        """
        policy = (v or "").strip().lower()
        if policy not in TITLE_YEAR_RANGE_POLICIES:
            raise ValueError(
                f"TITLE_YEAR_RANGE_POLICY must be one of {', '.join(TITLE_YEAR_RANGE_POLICIES)}, "
                f"got {v!r}"
            )
        return policy

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Process-wide singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the settings singleton.

    The first call creates the Settings instance, later calls reuse it.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings_instance
    _settings_instance = None
