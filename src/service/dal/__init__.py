"""
Data Access Layer (DAL) for the API deployment service.

This module provides the interfaces and factory functions for the remote
API management operations used by the deployment trigger handler.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class DeploymentDalHandler(Protocol):
    """Protocol defining the remote API management interface."""

    def create_deployment(self, rest_api_id: str) -> str:
        """Create a deployment snapshot and return its id."""
        ...

    def update_stage(self, rest_api_id: str, stage_name: str, deployment_id: str) -> Dict[str, Any]:
        """Point a stage at a deployment and return the updated stage."""
        ...


class BaseDeploymentDalHandler(ABC):
    """Abstract base class for remote API management implementations."""

    @abstractmethod
    def create_deployment(self, rest_api_id: str) -> str:
        """Create a deployment snapshot and return its id."""
        pass

    @abstractmethod
    def update_stage(self, rest_api_id: str, stage_name: str, deployment_id: str) -> Dict[str, Any]:
        """Point a stage at a deployment and return the updated stage."""
        pass


def get_dal_handler(region_name: Optional[str] = None, endpoint_url: Optional[str] = None) -> DeploymentDalHandler:
    """
    Factory function to get the API Gateway DAL handler.

    Args:
        region_name: AWS region of the REST API
        endpoint_url: Optional custom endpoint, for local emulators

    Returns:
        DAL handler instance
    """
    # Import here to avoid circular imports
    from service.dal.apigateway_handler import ApiGatewayHandler

    return ApiGatewayHandler.from_region(region_name=region_name, endpoint_url=endpoint_url)


__all__ = [
    'DeploymentDalHandler',
    'BaseDeploymentDalHandler',
    'get_dal_handler'
]
