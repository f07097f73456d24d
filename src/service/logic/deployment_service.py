"""
Business Logic Layer for API stage deployments.

Validates the custom resource properties and rolls a REST API stage onto a
freshly created deployment. Every call creates a new deployment, even when
the target is unchanged.
"""

from typing import Any, Dict, List, Mapping

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import ValidationError as PydanticValidationError

from service.dal import DeploymentDalHandler
from service.handlers.utils.errors import ValidationError
from service.handlers.utils.observability import logger, metrics, tracer
from service.models.input import API_ID_PROPERTY, API_STAGE_PROPERTY, DeploymentRequest
from service.models.output import DeploymentResult


class DeploymentValidationError(ValidationError):
    """Raised when the API id or stage name property is missing or invalid."""

    def __init__(self, field_errors: List[Dict[str, str]]):
        super().__init__(
            message=f'"{API_ID_PROPERTY}" and "{API_STAGE_PROPERTY}" is required',
            field_errors=field_errors,
        )


def parse_deployment_request(properties: Mapping[str, Any]) -> DeploymentRequest:
    """
    Build a deployment request from custom resource properties.

    Raises:
        DeploymentValidationError: If either property is missing, empty or not a string
    """
    try:
        return DeploymentRequest.model_validate(dict(properties))
    except PydanticValidationError as e:
        field_errors = [
            {"field": str(error["loc"][-1]), "message": error["msg"]}
            for error in e.errors()
        ]
        raise DeploymentValidationError(field_errors) from e


class DeploymentService:
    """Business logic service for REST API deployments."""

    def __init__(self, dal_handler: DeploymentDalHandler):
        """
        Initialize deployment service.

        Args:
            dal_handler: Remote API management handler
        """
        self.dal_handler = dal_handler

    @tracer.capture_method
    def deploy(self, request: DeploymentRequest) -> DeploymentResult:
        """
        Create a deployment and point the requested stage at it.

        The two calls are not transactional: when the stage update fails the
        new deployment is left behind and the error propagates.

        Args:
            request: Validated deployment target

        Returns:
            Result built from the updated stage
        """
        logger.info(f'deploying {request.rest_api_id}/{request.stage_name}')

        deployment_id = self.dal_handler.create_deployment(request.rest_api_id)
        stage = self.dal_handler.update_stage(
            rest_api_id=request.rest_api_id,
            stage_name=request.stage_name,
            deployment_id=deployment_id,
        )
        result = DeploymentResult.from_stage(stage)

        metrics.add_metric(name="DeploymentCreated", unit=MetricUnit.Count, value=1)
        logger.info("complete deploy", extra={"deployment_id": result.deployment_id})
        return result
