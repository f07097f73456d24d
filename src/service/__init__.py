"""
API Gateway Deploy Service Module.

This package contains the deployment trigger implementation following the
three-layer architecture pattern:

- handlers: Lambda entry points and custom resource event dispatch
- logic: Deployment rules
- dal: API Gateway control plane access
- models: Lifecycle event and response schemas
"""

__version__ = "1.0.0"
__description__ = "Custom resource that redeploys an API Gateway stage"

# Re-export commonly used classes for convenience
from service.models.input import DeploymentRequest, LifecycleEvent, RequestType
from service.models.output import CustomResourceResponse, DeploymentResult
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "DeploymentRequest",
    "LifecycleEvent",
    "RequestType",
    "CustomResourceResponse",
    "DeploymentResult",
    "logger",
    "tracer",
    "metrics",
]
