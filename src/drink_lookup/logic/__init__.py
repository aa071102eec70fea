"""
Business logic layer for the drink lookup service.
"""

from drink_lookup.logic.lookup_service import (
    DrinkImageNotFoundError,
    LookupService,
    decode_body,
    parse_lookup_request,
)

__all__ = [
    "DrinkImageNotFoundError",
    "LookupService",
    "decode_body",
    "parse_lookup_request",
]
