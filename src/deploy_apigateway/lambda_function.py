"""
Deploy API Gateway Lambda Function - Entry point for the custom resource.

This module serves as the Lambda function entry point that delegates to the
deployment trigger handler of the service package.
"""

from typing import Any, Dict, Union

from aws_lambda_powertools.utilities.typing import LambdaContext
from service.handlers.deploy_handler import lambda_handler as deploy_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Union[Dict[str, Any], str]:
    """
    Lambda function entry point for the API deployment custom resource.

    Args:
        event: Custom resource lifecycle event
        context: Lambda context object

    Returns:
        Provider response dictionary, or ``"ok"`` on Delete
    """
    return deploy_handler(event, context)
