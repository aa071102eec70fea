"""
AWS Lambda Handlers Module.

This module contains the Lambda entry point for drink image lookups. The handler
follows the three-layer architecture:

1. Handler Layer (this module): request/response handling and error mapping
2. Logic Layer: request validation and the lookup flow
3. Data Access Layer: DynamoDB reads
"""

from drink_lookup.handlers.lookup_handler import LookupHandler, get_lookup_handler, lambda_handler
from drink_lookup.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "LookupHandler",
    "get_lookup_handler",
    "lambda_handler",
    "logger",
    "tracer",
    "metrics",
]
