"""
Stack configuration model.

The stack is configured from CDK context (``cdk.json`` or ``-c key=value``)
and validated once when the app starts, before any construct is created.
"""

from typing import Annotated, Any, Dict
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

CONTEXT_KEYS = ('prefix', 'stage_name', 'log_level', 'memory_size', 'timeout_seconds')


class StackConfig(BaseModel):
    """Validated settings for the API deploy stack."""

    model_config = ConfigDict(frozen=True)

    prefix: Annotated[str, Field(
        description='Prefix of the API and function names',
        pattern=r'^[a-z0-9][a-z0-9-]{0,40}$'
    )] = 'cdk-custom-resource'

    stage_name: Annotated[str, Field(
        description='API Gateway stage redeployed by the custom resource',
        pattern=r'^[A-Za-z0-9_-]{1,128}$'
    )] = 'prod'

    log_level: Annotated[str, Field(
        description='Log level of both functions',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    memory_size: Annotated[int, Field(
        description='Lambda function memory allocation in MB',
        ge=128,
        le=10240
    )] = 256

    timeout_seconds: Annotated[int, Field(
        description='Lambda function timeout in seconds',
        ge=1,
        le=900
    )] = 30

    # A new token on every synthesis makes CloudFormation send Update to the custom resource
    correlation_token: Annotated[str, Field(
        default_factory=lambda: str(uuid4()),
        min_length=1,
        description='Value of the uuid property of the custom resource'
    )]

    @property
    def api_name(self) -> str:
        return f'{self.prefix}-api'

    @property
    def sample_function_name(self) -> str:
        return f'{self.prefix}-sample'

    @property
    def deploy_function_name(self) -> str:
        return f'{self.prefix}-api-deploy'

    @classmethod
    def from_context(cls, node: Any) -> 'StackConfig':
        """
        Read the configuration from a construct node's context.

        Args:
            node: Construct node, usually ``app.node``

        Returns:
            Validated stack configuration

        Raises:
            pydantic.ValidationError: If a context value is invalid
        """
        values: Dict[str, Any] = {}
        for key in CONTEXT_KEYS:
            value = node.try_get_context(key)
            if value is not None:
                values[key] = value
        return cls.model_validate(values)
