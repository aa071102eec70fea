"""
Lookup service - business logic for drink image lookups.

Parses and validates the inbound request body and resolves the image reference
through the injected store.
"""

import base64
import json
from typing import Any, Optional

from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from pydantic import ValidationError

from drink_lookup.dal import DrinkImageStore
from drink_lookup.handlers.utils.errors import (
    INVALID_JSON_PAYLOAD,
    INVALID_REQUEST_BODY,
    ClientInputError,
    NotFoundError,
    field_missing,
    field_not_a_string,
)
from drink_lookup.handlers.utils.observability import logger, metrics, tracer
from drink_lookup.models.input import LookupRequest


class DrinkImageNotFoundError(NotFoundError):
    """Raised when no drink image is stored under the requested key."""

    def __init__(self, bar_name: str, drink_name: str):
        super().__init__()
        self.bar_name = bar_name
        self.drink_name = drink_name


def decode_body(event: APIGatewayProxyEvent) -> str:
    """
    Return the request body as text.

    Raises:
        ClientInputError: If the body is absent, empty, or not valid UTF-8
    """
    body: Optional[str] = event.body
    if not body:
        raise ClientInputError(INVALID_REQUEST_BODY)

    try:
        if event.is_base64_encoded:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        else:
            # Lone surrogates cannot be encoded and mean the text was not UTF-8
            body.encode('utf-8')
    except (ValueError, UnicodeError) as e:
        raise ClientInputError(INVALID_REQUEST_BODY, cause=e) from e

    if not body:
        raise ClientInputError(INVALID_REQUEST_BODY)
    return body


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f'Invalid JSON constant: {name}')


def parse_lookup_request(body: str) -> LookupRequest:
    """
    Parse a JSON body into a LookupRequest.

    A JSON document that is not an object has no fields and reports ``barName`` as missing.

    Raises:
        ClientInputError: If the body is not JSON or a field is missing or not a string
    """
    try:
        payload: Any = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise ClientInputError(INVALID_JSON_PAYLOAD, cause=e) from e

    try:
        return LookupRequest.model_validate(payload if isinstance(payload, dict) else {})
    except ValidationError as e:
        error = e.errors()[0]
        field_name = str(error['loc'][0])
        if error['type'] == 'missing':
            raise field_missing(field_name) from e
        raise field_not_a_string(field_name) from e


class LookupService:
    """Resolves drink image references from the store."""

    def __init__(self, store: DrinkImageStore) -> None:
        self.store = store

    @tracer.capture_method
    def get_s3_object_key(self, request: LookupRequest) -> str:
        """
        Look up the object key stored for ``request``.

        Returns:
            The stored ``s3ObjectKey``, or ``"URL not found"`` when the record has none

        Raises:
            DrinkImageNotFoundError: If no record matches
            BackendError: If the store fails
        """
        bar_name, drink_name = request.key
        tracer.put_annotation('bar_name', bar_name)
        tracer.put_annotation('drink_name', drink_name)

        drink_image = self.store.get_drink_image(bar_name, drink_name)
        if drink_image is None:
            metrics.add_metric(name='DrinkImageNotFound', unit=MetricUnit.Count, value=1)
            raise DrinkImageNotFoundError(bar_name, drink_name)

        metrics.add_metric(name='DrinkImageFound', unit=MetricUnit.Count, value=1)
        if drink_image.s3_object_key is None:
            logger.warning('Drink image record has no s3ObjectKey', extra={
                'bar_name': bar_name,
                'drink_name': drink_name,
            })
        return drink_image.object_key_or_default
