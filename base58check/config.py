"""
Base58Check - Configuration Management
=======================================
Centralized configuration with Pydantic Settings.
Supports environment variables, .env files and runtime overrides.

Security Level: HIGH
Last Updated: 2026-10-18
Version: 1.0.0

Features:
- Automatic type validation
- Environment variables with BASE58CHECK_ prefix
- .env file support
- Cached singleton with explicit reload
"""

import hashlib
from pathlib import Path
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from base58check.constants import (
    BITCOIN_ALPHABET,
    BASE,
    CHECKSUM_LENGTH,
    DEFAULT_PREFIX_LENGTH,
    HASH_ALGORITHM,
)


# ============================================================================
# MAIN CONFIGURATION CLASS
# ============================================================================

class Base58Settings(BaseSettings):
    """
    Base58Check configuration.

    Supports:
    - Loading from environment variables (BASE58CHECK_*)
    - Loading from a .env file
    - Programmatic overrides
    - Automatic validation

    Example:
        # From environment
        export BASE58CHECK_PREFIX_LENGTH=4

        # From code
        config = Base58Settings(prefix_length=4)
    """

    model_config = SettingsConfigDict(
        env_prefix='BASE58CHECK_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    # ========================================================================
    # ENCODING
    # ========================================================================

    alphabet: str = Field(
        default=BITCOIN_ALPHABET,
        description="58 distinct symbols, index = digit value"
    )

    prefix_length: int = Field(
        default=DEFAULT_PREFIX_LENGTH,
        ge=0,
        description="Version prefix bytes split off by decode_check"
    )

    # ========================================================================
    # CHECKSUM
    # ========================================================================

    hash_name: str = Field(
        default=HASH_ALGORITHM,
        description="hashlib algorithm applied twice for the checksum"
    )

    checksum_length: int = Field(
        default=CHECKSUM_LENGTH,
        ge=1,
        le=32,
        description="Checksum bytes appended to the versioned payload"
    )

    # ========================================================================
    # LOGGING
    # ========================================================================

    log_level: str = Field(
        default="WARNING",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    log_format: str = Field(
        default="text",
        description="Log format: text or json"
    )

    log_to_file: bool = Field(
        default=False,
        description="Also write logs to a rotating file"
    )

    log_dir: Path = Field(
        default=Path("./logs"),
        description="Directory for log files"
    )

    # ========================================================================
    # VALIDATORS
    # ========================================================================

    @field_validator('alphabet')
    @classmethod
    def validate_alphabet(cls, v: str) -> str:
        """Alphabet must hold exactly 58 distinct characters"""
        if len(v) != BASE or len(set(v)) != BASE:
            raise ValueError(
                f"Invalid alphabet: expected {BASE} distinct characters, "
                f"got {len(v)} ({len(set(v))} distinct)"
            )
        return v

    @field_validator('hash_name')
    @classmethod
    def validate_hash_name(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in hashlib.algorithms_available:
            raise ValueError(f"Invalid hash_name: {v}. Not provided by hashlib")
        return v_lower

    @model_validator(mode="after")
    def validate_checksum_fits_digest(self) -> "Base58Settings":
        """checksum_length must fit inside one digest of hash_name"""
        # Variable-length digests (shake_*) report digest_size 0
        digest_size = hashlib.new(self.hash_name).digest_size
        if not 1 <= self.checksum_length <= digest_size:
            raise ValueError(
                f"Invalid checksum_length: {self.checksum_length} does not fit "
                f"a {self.hash_name} digest (1..{digest_size} bytes)"
            )
        return self

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log_level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ['text', 'json']
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(f"Invalid log_format: {v}. Must be one of {valid_formats}")
        return v_lower

    # ========================================================================
    # HELPER METHODS
    # ========================================================================

    def uses_bitcoin_alphabet(self) -> bool:
        return self.alphabet == BITCOIN_ALPHABET

    def to_dict(self) -> dict:
        """Serialize config"""
        return self.model_dump()

    def to_json(self) -> str:
        """Serialize config to JSON"""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> "Base58Settings":
        """Load config from JSON"""
        return cls.model_validate_json(json_str)

    def __repr__(self) -> str:
        return (
            f"Base58Settings("
            f"prefix_length={self.prefix_length}, "
            f"hash_name={self.hash_name}, "
            f"checksum_length={self.checksum_length}, "
            f"bitcoin_alphabet={self.uses_bitcoin_alphabet()})"
        )


# ============================================================================
# SINGLETON INSTANCE
# ============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Base58Settings:
    """
    Get the cached Base58Settings instance.

    Returns:
        Base58Settings: Configuration instance

    Example:
        >>> config = get_settings()
        >>> config.prefix_length
        1
    """
    return Base58Settings()


def reload_settings() -> Base58Settings:
    """
    Reload settings (invalidates the cache).

    Use after changing environment variables at runtime.
    """
    get_settings.cache_clear()
    return get_settings()


def override_settings(**kwargs) -> Base58Settings:
    """
    Build settings with custom values, bypassing the cache.

    Example:
        >>> settings = override_settings(prefix_length=4)
    """
    return Base58Settings(**kwargs)


# ============================================================================
# EXPORT
# ============================================================================

__all__ = [
    "Base58Settings",
    "get_settings",
    "reload_settings",
    "override_settings",
]
