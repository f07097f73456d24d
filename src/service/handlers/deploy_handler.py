"""
Deployment Trigger Handler - custom resource handler for API Gateway redeploys.

Receives the Create, Update and Delete lifecycle events of the custom
resource provider framework. Create and Update roll the API stage onto a new
deployment; Delete is a no-op.
"""

from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Union

from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from botocore.exceptions import BotoCoreError, ClientError

from service.dal import DeploymentDalHandler, get_dal_handler
from service.handlers.models.env_vars import get_handler_env_vars
from service.handlers.utils.errors import log_error_metrics
from service.handlers.utils.observability import logger, metrics, tracer
from service.logic.deployment_service import (
    DeploymentService,
    DeploymentValidationError,
    parse_deployment_request,
)
from service.models.input import LifecycleEvent
from service.models.output import DELETE_RESPONSE, CustomResourceResponse


@lru_cache(maxsize=1)
def get_deployment_dal_handler() -> DeploymentDalHandler:
    """Create the API Gateway handler once per execution environment."""
    env_vars = get_handler_env_vars()
    return get_dal_handler(
        region_name=env_vars.AWS_REGION,
        endpoint_url=env_vars.APIGATEWAY_ENDPOINT_URL,
    )


@tracer.capture_method
def put_api(lifecycle_event: LifecycleEvent, dal_handler: DeploymentDalHandler) -> Dict[str, Any]:
    """Deploy the API named by the event and build the provider response."""
    try:
        request = parse_deployment_request(lifecycle_event.resource_properties)
    except DeploymentValidationError as e:
        log_error_metrics(e)
        raise

    tracer.put_annotation("rest_api_id", request.rest_api_id)
    tracer.put_annotation("stage_name", request.stage_name)

    try:
        result = DeploymentService(dal_handler).deploy(request)
    except (ClientError, BotoCoreError) as e:
        logger.exception("Deployment failed", extra={
            "rest_api_id": request.rest_api_id,
            "stage_name": request.stage_name,
            "error": str(e),
        })
        metrics.add_metric(name="DeploymentFailed", unit=MetricUnit.Count, value=1)
        raise

    return CustomResourceResponse.for_deployment(request, result).to_provider_response()


def handle_lifecycle_event(
    event: Mapping[str, Any],
    dal_handler: Optional[DeploymentDalHandler] = None,
) -> Union[Dict[str, Any], str]:
    """
    Dispatch a custom resource lifecycle event.

    Args:
        event: Raw lifecycle event from the provider framework
        dal_handler: Remote API management handler used on Create and Update,
            the shared handler is built on first use when omitted

    Returns:
        Provider response on Create and Update, ``"ok"`` on Delete
    """
    lifecycle_event = LifecycleEvent.model_validate(event)
    tracer.put_annotation("request_type", lifecycle_event.request_type.value)

    if lifecycle_event.is_delete:
        logger.info("Delete requested, nothing to undeploy", extra={
            "physical_resource_id": lifecycle_event.physical_resource_id,
        })
        metrics.add_metric(name="DeleteNoOp", unit=MetricUnit.Count, value=1)
        return DELETE_RESPONSE

    # Create and Update both redeploy
    if dal_handler is None:
        dal_handler = get_deployment_dal_handler()
    return put_api(lifecycle_event, dal_handler)


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(log_event=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Union[Dict[str, Any], str]:
    """
    Deployment trigger function handler with AWS Powertools

    Args:
        event: Custom resource lifecycle event
        context: Lambda context object

    Returns:
        Custom resource provider response
    """
    logger.info("Lambda invocation started", extra={
        "request_id": context.aws_request_id,
        "function_name": context.function_name,
        "remaining_time_ms": context.get_remaining_time_in_millis(),
    })

    response = handle_lifecycle_event(event)

    logger.info("Lambda invocation completed", extra={"response": response})
    return response
