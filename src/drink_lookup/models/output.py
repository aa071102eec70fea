"""
Output models for API responses using Pydantic.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class LookupOutput(BaseModel):
    """Response model for a successful lookup."""

    model_config = ConfigDict(populate_by_name=True)

    s3_object_key: Annotated[str, Field(
        alias='s3ObjectKey',
        description='Object storage key of the drink image',
        examples=['images/mojito.png']
    )]


class MessageOutput(BaseModel):
    """Response model carrying a single message, used for preflight and errors."""

    message: Annotated[str, Field(
        description='Human readable message',
        examples=['Item not found', 'barName is missing']
    )]
