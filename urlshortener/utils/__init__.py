"""Utils package for URL Shortener Service."""

from .shortener import (
    ALPHABET,
    generate_short_id,
    validate_short_id,
    clean_url,
    is_valid_url,
    create_short_url,
    truncate_url,
)

__all__ = [
    "ALPHABET",
    "generate_short_id",
    "validate_short_id",
    "clean_url",
    "is_valid_url",
    "create_short_url",
    "truncate_url",
]
