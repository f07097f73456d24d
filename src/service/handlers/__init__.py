"""
AWS Lambda Handlers Module.

This module contains the handler layer of the deployment service. The
handler validates the custom resource lifecycle event, delegates to the logic
layer and returns the response the provider framework expects:

1. Handler Layer (this module): Event parsing, dispatch, response building
2. Logic Layer: Deployment rules
3. Data Access Layer: API Gateway control plane calls

The handlers use AWS Lambda Powertools for:
- Structured logging with the Lambda context injected
- Distributed tracing with X-Ray
- Custom metrics collection
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
