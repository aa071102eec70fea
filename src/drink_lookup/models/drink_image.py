"""
Drink image domain model.

A read-only view of a record stored in the drink images table.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

URL_NOT_FOUND = 'URL not found'


class DrinkImage(BaseModel):
    """Stored record keyed by ``(barName, drinkName)``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bar_name: str = Field(alias='barName')
    drink_name: str = Field(alias='drinkName')
    s3_object_key: Optional[str] = Field(default=None, alias='s3ObjectKey')

    @classmethod
    def from_item(cls, bar_name: str, drink_name: str, item: Dict[str, Any]) -> 'DrinkImage':
        """
        Build a DrinkImage from a DynamoDB item.

        Only ``s3ObjectKey`` is consumed; a value that is not a string is treated as absent.
        """
        object_key = item.get('s3ObjectKey')
        return cls(
            bar_name=bar_name,
            drink_name=drink_name,
            s3_object_key=object_key if isinstance(object_key, str) else None,
        )

    @property
    def object_key_or_default(self) -> str:
        return self.s3_object_key if self.s3_object_key is not None else URL_NOT_FOUND
