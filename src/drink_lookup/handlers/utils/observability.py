"""
Powertools instances shared by the drink lookup layers.

The handler, the lookup service and the DynamoDB handler log, trace and emit
metrics through these three objects so every record of one invocation carries
the same service name and correlation id.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# EMF namespace for lookup counters (LookupRequest, DrinkImageFound, StoreError, ...)
METRICS_NAMESPACE = 'DrinkLookup'

# Structured JSON logs; level from LOG_LEVEL, service from POWERTOOLS_SERVICE_NAME
logger: Logger = Logger()

# Annotates bar/drink lookups; a no-op outside Lambda or with POWERTOOLS_TRACE_DISABLED
tracer: Tracer = Tracer()

# Flushed by lambda_handler through metrics.log_metrics
metrics = Metrics(namespace=METRICS_NAMESPACE)
