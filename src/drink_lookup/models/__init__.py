"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including the input model, output response models, and the stored record model.
"""

from .input import LookupRequest
from .output import LookupOutput, MessageOutput
from .drink_image import DrinkImage, URL_NOT_FOUND

__all__ = [
    # Input models
    "LookupRequest",

    # Output models
    "LookupOutput",
    "MessageOutput",

    # Domain models
    "DrinkImage",
    "URL_NOT_FOUND",
]
