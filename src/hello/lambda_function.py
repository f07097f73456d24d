import json
from typing import Any, Dict

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit

# Initialize AWS Powertools
logger = Logger(service="hello-service")
tracer = Tracer(service="hello-service")
metrics = Metrics(namespace="ApiDeployCustomResource/Hello", service="hello-service")

GREETING = {"message": "hello world"}


def build_greeting_response() -> Dict[str, Any]:
    """Build the fixed greeting served on every request."""
    # compact separators keep the body byte-identical to JSON.stringify output
    return {
        "statusCode": 200,
        "body": json.dumps(GREETING, separators=(",", ":")),
    }


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, log_event=True)
def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Hello Lambda function handler with AWS Powertools

    Args:
        event: API Gateway proxy event, only logged
        context: Lambda context object

    Returns:
        API Gateway response
    """
    logger.info("hello world")

    metrics.add_metric(name="GreetingCount", unit=MetricUnit.Count, value=1)

    return build_greeting_response()
