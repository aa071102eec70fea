"""
Fire-and-forget trace segment emission.

Each invocation sends one X-Ray segment document through ``PutTraceSegments``.
Emission failures are logged and swallowed; they never change the HTTP response.
"""

import json
import secrets
import time
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from drink_lookup.handlers.utils.errors import TelemetryError
from drink_lookup.handlers.utils.observability import logger


@runtime_checkable
class TraceEmitter(Protocol):
    """Narrow capability for emitting one trace event."""

    def emit(self, event: Dict[str, Any]) -> None:
        ...


class NullTraceEmitter:
    """Emitter used when segment emission is disabled."""

    def emit(self, event: Dict[str, Any]) -> None:
        return None


def new_trace_id(now: Optional[float] = None) -> str:
    """Return an X-Ray trace id: ``1-<8 hex epoch seconds>-<24 hex random>``."""
    epoch = int(now if now is not None else time.time())
    return f'1-{epoch:08x}-{secrets.token_hex(12)}'


def build_segment_document(name: str, event: Dict[str, Any], now: Optional[float] = None) -> Dict[str, Any]:
    """
    Build an X-Ray segment document for one invocation.

    Scalar values of ``event`` become annotations; ``start_time`` and ``end_time``
    default to the current time.
    """
    timestamp = now if now is not None else time.time()
    annotations = {
        key: value for key, value in event.items()
        if isinstance(value, (str, int, float, bool)) and key not in ('start_time', 'end_time')
    }
    return {
        'name': name,
        'id': secrets.token_hex(8),
        'trace_id': new_trace_id(timestamp),
        'start_time': event.get('start_time', timestamp),
        'end_time': event.get('end_time', timestamp),
        'annotations': annotations,
    }


class XRayTraceEmitter:
    """Sends segment documents with the X-Ray ``PutTraceSegments`` API."""

    def __init__(self, segment_name: str, client: Any = None, region_name: Optional[str] = None) -> None:
        self.segment_name = segment_name
        self.client = client if client is not None else boto3.client('xray', region_name=region_name)

    def emit(self, event: Dict[str, Any]) -> None:
        try:
            self._put_segment(build_segment_document(self.segment_name, event))
        except TelemetryError as e:
            logger.warning('Failed to record X-Ray segment', extra=e.to_dict())
        else:
            logger.info('Successfully recorded X-Ray segment')

    def _put_segment(self, document: Dict[str, Any]) -> None:
        try:
            response = self.client.put_trace_segments(TraceSegmentDocuments=[json.dumps(document)])
        except (ClientError, BotoCoreError) as e:
            raise TelemetryError('PutTraceSegments failed', cause=e) from e

        unprocessed = response.get('UnprocessedTraceSegments') or []
        if unprocessed:
            raise TelemetryError(f'X-Ray rejected segment: {unprocessed[0].get("ErrorCode")}')
