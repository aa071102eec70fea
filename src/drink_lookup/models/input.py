"""
Input models for request validation using Pydantic.

This module defines the lookup request parsed from the API Gateway body.
"""

from typing import Annotated, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class LookupRequest(BaseModel):
    """Request model for looking up a drink image."""

    model_config = ConfigDict(frozen=True)

    # Populated by alias only; barName errors are reported before drinkName
    bar_name: Annotated[StrictStr, Field(
        alias='barName',
        description='Name of the bar serving the drink',
        examples=['The Tipsy Cow']
    )]

    drink_name: Annotated[StrictStr, Field(
        alias='drinkName',
        description='Name of the drink',
        examples=['Mojito']
    )]

    @property
    def key(self) -> Tuple[str, str]:
        """Composite store key ``(barName, drinkName)``."""
        return self.bar_name, self.drink_name
