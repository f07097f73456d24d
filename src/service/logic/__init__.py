"""
Business Logic Layer Module.

This module contains the deployment logic that sits between the custom
resource handler and the API Gateway data access layer.
"""

from service.logic.deployment_service import (
    DeploymentService,
    DeploymentValidationError,
    parse_deployment_request,
)

__all__ = [
    "DeploymentService",
    "DeploymentValidationError",
    "parse_deployment_request",
]
