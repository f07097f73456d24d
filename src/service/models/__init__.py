"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including lifecycle event models, deployment results and the responses
returned to the custom resource provider framework.
"""

from .input import (
    API_ID_PROPERTY,
    API_STAGE_PROPERTY,
    DeploymentRequest,
    LifecycleEvent,
    RequestType,
)
from .output import (
    DELETE_RESPONSE,
    CustomResourceData,
    CustomResourceResponse,
    DeploymentResult,
)

__all__ = [
    # Input models
    "API_ID_PROPERTY",
    "API_STAGE_PROPERTY",
    "DeploymentRequest",
    "LifecycleEvent",
    "RequestType",

    # Output models
    "DELETE_RESPONSE",
    "CustomResourceData",
    "CustomResourceResponse",
    "DeploymentResult",
]
