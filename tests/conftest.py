"""
Pytest configuration and shared fixtures for the drink lookup service.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import json
import os
from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

# Set before the service modules build their Powertools instances
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "TABLE_NAME": "drink_images",
    "POWERTOOLS_SERVICE_NAME": "test-drink-lookup",
    "POWERTOOLS_METRICS_NAMESPACE": "TestDrinkLookup",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "TRACE_SEGMENTS_ENABLED": "false",
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",  # Re-read env vars on every call
})

from drink_lookup.handlers import lookup_handler  # noqa: E402
from drink_lookup.models.drink_image import DrinkImage  # noqa: E402

TABLE_NAME = "drink_images"


# DynamoDB fixtures
@pytest.fixture
def aws_mock():
    """Activate moto for every AWS service used by the handler."""
    with mock_aws():
        yield


@pytest.fixture
def dynamodb_table(aws_mock):
    """Create a mock drink images table keyed by barName and drinkName."""
    dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

    table = dynamodb.create_table(
        TableName=TABLE_NAME,
        KeySchema=[
            {"AttributeName": "barName", "KeyType": "HASH"},
            {"AttributeName": "drinkName", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "barName", "AttributeType": "S"},
            {"AttributeName": "drinkName", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )

    table.wait_until_exists()
    yield table


@pytest.fixture
def populated_table(dynamodb_table):
    """Drink images table with a few records, one of them lacking s3ObjectKey."""
    dynamodb_table.put_item(Item={
        "barName": "The Tipsy Cow",
        "drinkName": "Mojito",
        "s3ObjectKey": "images/mojito.png",
    })
    dynamodb_table.put_item(Item={
        "barName": "The Tipsy Cow",
        "drinkName": "Negroni",
        "s3ObjectKey": "images/negroni.png",
    })
    dynamodb_table.put_item(Item={
        "barName": "Harbour Lights",
        "drinkName": "Old Fashioned",
    })
    yield dynamodb_table


# Event fixtures
@pytest.fixture
def make_event() -> Callable[..., Dict[str, Any]]:
    """Factory building API Gateway REST proxy events."""

    def _make_event(
        http_method: str = "POST",
        body: Any = None,
        is_base64_encoded: bool = False,
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "resource": "/drink-image",
            "path": "/drink-image",
            "httpMethod": http_method,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "multiValueHeaders": {},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": http_method,
                "path": "/drink-image",
                "identity": {"sourceIp": "127.0.0.1"},
            },
            "body": body,
            "isBase64Encoded": is_base64_encoded,
        }

    return _make_event


@pytest.fixture
def lookup_event(make_event) -> Dict[str, Any]:
    """A valid lookup request for the Mojito at The Tipsy Cow."""
    return make_event(body={"barName": "The Tipsy Cow", "drinkName": "Mojito"})


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "drink-lookup-function"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:drink-lookup-function"
    context.memory_limit_in_mb = 128
    context.aws_request_id = "test-lambda-request-id"
    context.log_group_name = "/aws/lambda/drink-lookup-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


# Fakes for injected dependencies
class FakeStore:
    """In-memory drink image store recording every lookup."""

    def __init__(self, records: Optional[Dict[tuple, Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.records = records or {}
        self.error = error
        self.calls = []

    def get_drink_image(self, bar_name: str, drink_name: str) -> Optional[DrinkImage]:
        self.calls.append((bar_name, drink_name))
        if self.error is not None:
            raise self.error
        item = self.records.get((bar_name, drink_name))
        if item is None:
            return None
        return DrinkImage.from_item(bar_name, drink_name, item)


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore(records={
        ("The Tipsy Cow", "Mojito"): {"s3ObjectKey": "images/mojito.png"},
        ("Harbour Lights", "Old Fashioned"): {},
    })


# Error simulation fixtures
@pytest.fixture
def mock_dynamodb_error():
    """Build botocore ClientErrors for testing error handling."""
    from botocore.exceptions import ClientError

    def create_error(error_code: str, message: str = "Test error", operation_name: str = "GetItem"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name=operation_name,
        )

    return create_error


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the cached handler and environment between tests."""
    lookup_handler._lookup_handler = None
    yield
    lookup_handler._lookup_handler = None
