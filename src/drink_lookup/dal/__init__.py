"""
Data Access Layer (DAL) for the drink lookup service.

This module provides the read-only store interface and the factory used by the
handler to build its default store.
"""

from typing import Optional, Protocol, runtime_checkable

from drink_lookup.models.drink_image import DrinkImage


@runtime_checkable
class DrinkImageStore(Protocol):
    """Protocol defining the data access layer interface."""

    def get_drink_image(self, bar_name: str, drink_name: str) -> Optional[DrinkImage]:
        """Retrieve the record stored under ``(bar_name, drink_name)``, or None."""
        ...


def get_dal_handler(
    table_name: str,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
) -> DrinkImageStore:
    """
    Factory function to get the DynamoDB-backed store.

    Args:
        table_name: Name of the DynamoDB table
        region_name: AWS region name
        endpoint_url: DynamoDB endpoint URL (for local testing)

    Returns:
        DAL handler instance
    """
    # Import here to avoid circular imports
    from drink_lookup.dal.dynamodb_handler import DynamoDbHandler

    return DynamoDbHandler(table_name, region_name=region_name, endpoint_url=endpoint_url)


__all__ = [
    'DrinkImageStore',
    'get_dal_handler',
]
