"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for environment variables read by the
lookup handler when it builds its default dependencies.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field

DEFAULT_TABLE_NAME = 'drink_images'


class LookupHandlerEnvVars(BaseModel):
    """Environment variables for the drink lookup handler."""

    # DynamoDB table holding the drink image references
    TABLE_NAME: Annotated[str, Field(
        default=DEFAULT_TABLE_NAME,
        description='DynamoDB table name for drink image records',
        min_length=1
    )] = DEFAULT_TABLE_NAME

    # AWS region
    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service deployment'
    )] = 'us-east-1'

    # Local DynamoDB endpoint, e.g. http://localhost:8000
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL override for local testing'
    )] = None

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='drink-lookup',
        description='Service name for AWS Powertools'
    )] = 'drink-lookup'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    # Explicit X-Ray segment emission, independent of the Powertools tracer
    TRACE_SEGMENTS_ENABLED: Annotated[str, Field(
        default='true',
        description='Emit one X-Ray trace segment per invocation (true/false)',
        pattern=r'^(true|false)$'
    )] = 'true'

    TRACE_SEGMENT_NAME: Annotated[str, Field(
        default='drink-lookup',
        description='Name of the emitted X-Ray segment',
        min_length=1
    )] = 'drink-lookup'

    # API Gateway settings
    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        default='*',
        description='CORS allowed origins for API responses'
    )] = '*'

    CORS_ALLOW_HEADERS: Annotated[str, Field(
        default='Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token',
        description='CORS allowed headers for API requests'
    )] = 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token'

    CORS_ALLOW_METHODS: Annotated[str, Field(
        default='POST,GET,OPTIONS',
        description='CORS allowed HTTP methods'
    )] = 'POST,GET,OPTIONS'

    @property
    def trace_segments_enabled(self) -> bool:
        """Check if explicit X-Ray segment emission is enabled."""
        return self.TRACE_SEGMENTS_ENABLED.lower() == 'true'


def get_handler_env_vars() -> LookupHandlerEnvVars:
    """
    Get typed environment variables for the lookup handler.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=LookupHandlerEnvVars)
