"""
Output models for handler responses using Pydantic.

This module defines the models returned to the custom resource provider
framework and the deployment result read back from API Gateway.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from service.models.input import DeploymentRequest

# Returned on Delete, the provider framework keeps the current physical id
DELETE_RESPONSE = 'ok'


class DeploymentResult(BaseModel):
    """Stage descriptor returned by API Gateway after repointing the stage."""

    model_config = ConfigDict(populate_by_name=True)

    deployment_id: Annotated[str, Field(
        alias='deploymentId',
        min_length=1,
        description='Deployment the stage now points at',
        examples=['abc123']
    )]

    stage_name: Annotated[str, Field(
        alias='stageName',
        description='Name of the updated stage',
        examples=['prod']
    )]

    last_updated_date: Annotated[Optional[datetime], Field(
        alias='lastUpdatedDate',
        description='Timestamp of the stage update'
    )] = None

    @classmethod
    def from_stage(cls, stage: Dict[str, Any]) -> 'DeploymentResult':
        """Build a result from a boto3 ``update_stage`` response."""
        return cls.model_validate(stage)


class CustomResourceData(BaseModel):
    """Attributes exposed to the stack through ``Fn::GetAtt``."""

    API_ID: str
    API_STAGE: str


class CustomResourceResponse(BaseModel):
    """Response handed back to the custom resource provider framework."""

    PhysicalResourceId: Annotated[str, Field(
        min_length=1,
        description='Physical id of the custom resource, the new deployment id'
    )]

    Data: CustomResourceData

    @classmethod
    def for_deployment(cls, request: DeploymentRequest, result: DeploymentResult) -> 'CustomResourceResponse':
        return cls(
            PhysicalResourceId=result.deployment_id,
            Data=CustomResourceData(
                API_ID=request.rest_api_id,
                API_STAGE=request.stage_name,
            ),
        )

    def to_provider_response(self) -> Dict[str, Any]:
        """Serialize to the plain dictionary the provider framework expects."""
        return self.model_dump()
