"""
Input models for event validation using Pydantic.

This module defines the models used for validating the CloudFormation
custom resource lifecycle events received by the deployment trigger handler.
"""

from enum import Enum
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

API_ID_PROPERTY = 'API_ID'
API_STAGE_PROPERTY = 'API_STAGE'


class RequestType(str, Enum):
    """Custom resource lifecycle request types."""

    CREATE = 'Create'
    UPDATE = 'Update'
    DELETE = 'Delete'


class LifecycleEvent(BaseModel):
    """Lifecycle event sent by the custom resource provider framework."""

    model_config = ConfigDict(populate_by_name=True)

    request_type: Annotated[RequestType, Field(
        alias='RequestType',
        description='Lifecycle stage of the custom resource',
        examples=['Create', 'Update', 'Delete']
    )]

    resource_properties: Annotated[Dict[str, Any], Field(
        alias='ResourceProperties',
        default_factory=dict,
        description='Properties declared on the custom resource'
    )]

    old_resource_properties: Annotated[Optional[Dict[str, Any]], Field(
        alias='OldResourceProperties',
        description='Previous properties, only present on Update'
    )] = None

    physical_resource_id: Annotated[Optional[str], Field(
        alias='PhysicalResourceId',
        description='Current physical id, absent on Create'
    )] = None

    logical_resource_id: Annotated[Optional[str], Field(
        alias='LogicalResourceId',
    )] = None

    request_id: Annotated[Optional[str], Field(
        alias='RequestId',
    )] = None

    stack_id: Annotated[Optional[str], Field(
        alias='StackId',
    )] = None

    resource_type: Annotated[Optional[str], Field(
        alias='ResourceType',
    )] = None

    @property
    def is_delete(self) -> bool:
        return self.request_type == RequestType.DELETE


class DeploymentRequest(BaseModel):
    """Target of a deployment, built from the custom resource properties."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    rest_api_id: Annotated[str, Field(
        alias=API_ID_PROPERTY,
        strict=True,
        min_length=1,
        description='Identifier of the REST API to deploy',
        examples=['a1b2c3d4e5']
    )]

    stage_name: Annotated[str, Field(
        alias=API_STAGE_PROPERTY,
        strict=True,
        min_length=1,
        description='Stage to point at the new deployment',
        examples=['prod']
    )]
