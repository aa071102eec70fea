"""
Lookup Handler - Lambda function returning the stored image key of a drink.

This module implements the handler layer: it translates one API Gateway proxy
event into one proxy response, performing a single read against the drink
images table. Every error is converted to a response here; nothing propagates
past the handler boundary.
"""

import time
from typing import Any, Dict, Optional, Union

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from drink_lookup.dal import DrinkImageStore, get_dal_handler
from drink_lookup.handlers.models.env_vars import get_handler_env_vars
from drink_lookup.handlers.utils.errors import INTERNAL_SERVER_ERROR, BaseServiceError, ClientInputError
from drink_lookup.handlers.utils.observability import logger, metrics, tracer
from drink_lookup.handlers.utils.responses import (
    CorsSettings,
    create_api_response,
    message_response,
    preflight_response,
)
from drink_lookup.handlers.utils.telemetry import NullTraceEmitter, TraceEmitter, XRayTraceEmitter
from drink_lookup.logic.lookup_service import LookupService, decode_body, parse_lookup_request
from drink_lookup.models.output import LookupOutput


class LookupHandler:
    """Stateless request handler; store and trace emitter are injected."""

    def __init__(
        self,
        store: DrinkImageStore,
        emitter: Optional[TraceEmitter] = None,
        cors: Optional[CorsSettings] = None,
    ) -> None:
        self.service = LookupService(store)
        self.emitter = emitter if emitter is not None else NullTraceEmitter()
        self.cors = cors if cors is not None else CorsSettings()

    def handle(self, event: Union[APIGatewayProxyEvent, Dict[str, Any]]) -> Dict[str, Any]:
        """
        Handle one API Gateway proxy event.

        Args:
            event: API Gateway REST proxy event, raw or wrapped

        Returns:
            API Gateway proxy response dictionary
        """
        if not isinstance(event, APIGatewayProxyEvent):
            event = APIGatewayProxyEvent(event)

        self._emit_trace(event)

        if event.http_method.upper() == 'OPTIONS':
            metrics.add_metric(name='PreflightRequest', unit=MetricUnit.Count, value=1)
            return preflight_response(self.cors)

        try:
            request = parse_lookup_request(decode_body(event))
        except ClientInputError as e:
            logger.info('Rejected invalid lookup request', extra={'reason': e.message})
            metrics.add_metric(name='InvalidRequest', unit=MetricUnit.Count, value=1)
            return message_response(e.status_code, e.message, self.cors)

        logger.info('Received lookup request', extra={
            'bar_name': request.bar_name,
            'drink_name': request.drink_name,
        })
        metrics.add_metric(name='LookupRequest', unit=MetricUnit.Count, value=1)

        try:
            object_key = self.service.get_s3_object_key(request)
        except BaseServiceError as e:
            if e.status_code >= 500:
                logger.error('Drink image lookup failed', extra=e.to_dict())
                metrics.add_metric(name='StoreError', unit=MetricUnit.Count, value=1)
            return message_response(e.status_code, e.message, self.cors)
        except Exception:
            logger.exception('Unexpected error during drink image lookup')
            metrics.add_metric(name='StoreError', unit=MetricUnit.Count, value=1)
            return message_response(500, INTERNAL_SERVER_ERROR, self.cors)

        return create_api_response(200, LookupOutput(s3_object_key=object_key), cors=self.cors)

    def _emit_trace(self, event: APIGatewayProxyEvent) -> None:
        trace_event = {
            'http_method': event.get('httpMethod', 'UNKNOWN'),
            'request_id': (event.get('requestContext') or {}).get('requestId', 'unknown'),
            'start_time': time.time(),
        }
        try:
            self.emitter.emit(trace_event)
        except Exception as e:
            logger.warning('Trace emission failed', extra={'error': str(e)})


_lookup_handler: Optional[LookupHandler] = None


def get_lookup_handler() -> LookupHandler:
    """Get or create the handler wired from environment configuration."""
    global _lookup_handler

    if _lookup_handler is None:
        env_vars = get_handler_env_vars()
        store = get_dal_handler(
            table_name=env_vars.TABLE_NAME,
            region_name=env_vars.AWS_REGION,
            endpoint_url=env_vars.DYNAMODB_ENDPOINT,
        )
        emitter: TraceEmitter = NullTraceEmitter()
        if env_vars.trace_segments_enabled:
            emitter = XRayTraceEmitter(env_vars.TRACE_SEGMENT_NAME, region_name=env_vars.AWS_REGION)
        cors = CorsSettings(
            allow_origin=env_vars.CORS_ALLOW_ORIGIN,
            allow_headers=env_vars.CORS_ALLOW_HEADERS,
            allow_methods=env_vars.CORS_ALLOW_METHODS,
        )
        _lookup_handler = LookupHandler(store, emitter=emitter, cors=cors)
        logger.info('Lookup handler initialized', extra={'table_name': env_vars.TABLE_NAME})

    return _lookup_handler


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for drink image lookups.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    try:
        handler = get_lookup_handler()
    except Exception:
        logger.exception('Failed to initialize lookup handler')
        return message_response(500, INTERNAL_SERVER_ERROR)

    return handler.handle(event)
