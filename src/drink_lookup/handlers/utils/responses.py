"""
API Gateway proxy response helpers.

Builds the response dictionaries returned to API Gateway, with a JSON body and
the CORS headers attached to every response.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

from drink_lookup.models.output import MessageOutput

CORS_PREFLIGHT_MESSAGE = 'CORS preflight response'


@dataclass(frozen=True)
class CorsSettings:
    """CORS header values attached to responses."""

    allow_origin: str = '*'
    allow_headers: str = 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token'
    allow_methods: str = 'POST,GET,OPTIONS'

    def to_headers(self) -> Dict[str, str]:
        return {
            'Access-Control-Allow-Origin': self.allow_origin,
            'Access-Control-Allow-Headers': self.allow_headers,
            'Access-Control-Allow-Methods': self.allow_methods,
        }


def create_api_response(
    status_code: int,
    body: Union[BaseModel, Dict[str, Any]],
    cors: Optional[CorsSettings] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create an API Gateway proxy response with a JSON body."""
    response_headers = {'Content-Type': 'application/json'}
    response_headers.update((cors or CorsSettings()).to_headers())
    if headers:
        response_headers.update(headers)

    payload = body.model_dump(by_alias=True) if isinstance(body, BaseModel) else body

    return {
        'statusCode': status_code,
        'headers': response_headers,
        'body': json.dumps(payload),
        'isBase64Encoded': False,
    }


def message_response(status_code: int, message: str, cors: Optional[CorsSettings] = None) -> Dict[str, Any]:
    """Create a response whose body is ``{"message": <message>}``."""
    return create_api_response(status_code, MessageOutput(message=message), cors=cors)


def preflight_response(cors: Optional[CorsSettings] = None) -> Dict[str, Any]:
    return message_response(200, CORS_PREFLIGHT_MESSAGE, cors=cors)
