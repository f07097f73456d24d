"""
Environment variable models for type-safe configuration.

This module defines Pydantic models for environment variables used by the
deployment trigger handler, validated once per execution environment.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class DeployHandlerEnvVars(BaseModel):
    """Environment variables for the deployment trigger handler."""

    # AWS region, set by the Lambda runtime
    AWS_REGION: Annotated[str, Field(
        description='AWS region of the target REST API',
        min_length=1
    )] = 'us-east-1'

    # Override for local API Gateway emulators
    APIGATEWAY_ENDPOINT_URL: Annotated[Optional[str], Field(
        description='Custom endpoint URL for the API Gateway client'
    )] = None


def get_handler_env_vars() -> DeployHandlerEnvVars:
    """
    Get typed environment variables for the deployment trigger handler.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=DeployHandlerEnvVars)
