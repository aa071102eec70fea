"""
DynamoDB implementation of the Data Access Layer (DAL).

Point lookups of drink image records keyed by ``(barName, drinkName)``.
"""

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from drink_lookup.handlers.utils.errors import BackendError
from drink_lookup.handlers.utils.observability import logger, tracer
from drink_lookup.models.drink_image import DrinkImage


class DrinkImageStoreError(BackendError):
    """Raised when DynamoDB fails to serve a lookup."""

    def __init__(self, operation: str, table_name: str, cause: Optional[BaseException] = None):
        super().__init__(cause=cause)
        self.operation = operation
        self.table_name = table_name


class DynamoDbHandler:
    """DynamoDB implementation of the drink image store."""

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        self.table_name = table_name

        session_config = {}
        if region_name:
            session_config['region_name'] = region_name
        if endpoint_url:
            session_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **session_config)
        self.table = self.dynamodb.Table(table_name)

        logger.debug('DynamoDB handler initialized', extra={
            'table_name': table_name,
            'region_name': region_name,
            'endpoint_url': endpoint_url,
        })

    @tracer.capture_method
    def get_drink_image(self, bar_name: str, drink_name: str) -> Optional[DrinkImage]:
        """
        Retrieve a drink image record by its composite key.

        Args:
            bar_name: Partition key value
            drink_name: Sort key value

        Returns:
            DrinkImage instance if found, None otherwise

        Raises:
            DrinkImageStoreError: If the DynamoDB call fails
        """
        try:
            response = self.table.get_item(
                Key={
                    'barName': bar_name,
                    'drinkName': drink_name,
                }
            )
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error retrieving drink image: {error_code}', extra={
                'table_name': self.table_name,
                'bar_name': bar_name,
                'drink_name': drink_name,
            })
            raise DrinkImageStoreError('get_item', self.table_name, cause=e) from e
        except BotoCoreError as e:
            logger.error(f'DynamoDB transport error retrieving drink image: {e}', extra={
                'table_name': self.table_name,
            })
            raise DrinkImageStoreError('get_item', self.table_name, cause=e) from e

        item = response.get('Item')
        if item is None:
            logger.info('Drink image not found', extra={'bar_name': bar_name, 'drink_name': drink_name})
            return None

        tracer.put_annotation('drink_image_found', True)
        return DrinkImage.from_item(bar_name, drink_name, item)
