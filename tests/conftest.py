"""
Pytest configuration and shared fixtures for the API deploy custom resource.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import os

# Must be set before the service package creates its boto3 client and Powertools instances
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "POWERTOOLS_SERVICE_NAME": "test-api-deploy",
    "POWERTOOLS_METRICS_NAMESPACE": "TestApiDeployCustomResource",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

import pytest
from datetime import datetime, timezone
from typing import Any, Dict
from unittest.mock import Mock

import boto3
from botocore.exceptions import ClientError
from botocore.stub import Stubber

from service.dal.apigateway_handler import ApiGatewayHandler


REST_API_ID = "api-123"
STAGE_NAME = "prod"


def _lifecycle_event(request_type: str, properties: Dict[str, Any]) -> Dict[str, Any]:
    event = {
        "RequestType": request_type,
        "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:framework-onEvent",
        "ResponseURL": "https://cloudformation-custom-resource-response-useast1.s3.amazonaws.com/test",
        "StackId": "arn:aws:cloudformation:us-east-1:123456789012:stack/CdkCustomResourceStack/guid",
        "RequestId": "unique-request-id",
        "LogicalResourceId": "CustomResource",
        "ResourceType": "AWS::CloudFormation::CustomResource",
        "ResourceProperties": {
            "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:framework-onEvent",
            **properties,
        },
    }
    if request_type != "Create":
        event["PhysicalResourceId"] = "dep-previous"
    if request_type == "Update":
        event["OldResourceProperties"] = dict(event["ResourceProperties"], uuid="previous-uuid")
    return event


@pytest.fixture
def resource_properties() -> Dict[str, Any]:
    """Valid custom resource properties."""
    return {
        "uuid": "0b8f6a6e-3c1d-4d2b-9a4e-7f1f2c3d4e5f",
        "API_ID": REST_API_ID,
        "API_STAGE": STAGE_NAME,
    }


@pytest.fixture
def make_lifecycle_event():
    """Factory for custom resource lifecycle events."""
    return _lifecycle_event


@pytest.fixture
def create_event(resource_properties) -> Dict[str, Any]:
    return _lifecycle_event("Create", resource_properties)


@pytest.fixture
def update_event(resource_properties) -> Dict[str, Any]:
    return _lifecycle_event("Update", resource_properties)


@pytest.fixture
def delete_event(resource_properties) -> Dict[str, Any]:
    return _lifecycle_event("Delete", resource_properties)


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "cdk-custom-resource-api-deploy"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:cdk-custom-resource-api-deploy"
    context.memory_limit_in_mb = "256"
    context.get_remaining_time_in_millis.return_value = 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/cdk-custom-resource-api-deploy"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# API Gateway fixtures
@pytest.fixture
def apigateway_client():
    """Real boto3 API Gateway client, to be wrapped by a Stubber."""
    return boto3.client("apigateway", region_name="us-east-1")


@pytest.fixture
def apigateway_stubber(apigateway_client):
    """Stubber that fails the test on unexpected or missing calls."""
    with Stubber(apigateway_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def apigateway_handler(apigateway_client) -> ApiGatewayHandler:
    return ApiGatewayHandler(apigateway_client)


@pytest.fixture
def stage_response():
    """Factory for update_stage responses."""
    def create(deployment_id: str, stage_name: str = STAGE_NAME) -> Dict[str, Any]:
        return {
            "deploymentId": deployment_id,
            "stageName": stage_name,
            "createdDate": datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
            "lastUpdatedDate": datetime(2024, 1, 1, 12, 5, tzinfo=timezone.utc),
        }

    return create


@pytest.fixture
def fake_dal_handler(stage_response):
    """In-memory DAL double handing out a new deployment id per call."""
    class FakeDalHandler:
        def __init__(self):
            self.calls = []
            self._counter = 0

        def create_deployment(self, rest_api_id: str) -> str:
            self._counter += 1
            deployment_id = f"dep-{self._counter}"
            self.calls.append(("create_deployment", {"rest_api_id": rest_api_id}))
            return deployment_id

        def update_stage(self, rest_api_id: str, stage_name: str, deployment_id: str) -> Dict[str, Any]:
            self.calls.append(("update_stage", {
                "rest_api_id": rest_api_id,
                "stage_name": stage_name,
                "deployment_id": deployment_id,
            }))
            return stage_response(deployment_id, stage_name)

    return FakeDalHandler()


# Error simulation fixtures
@pytest.fixture
def make_client_error():
    """Build botocore ClientErrors for testing error handling."""
    def create_error(error_code: str, message: str = "Test error", operation_name: str = "UpdateStage"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name=operation_name,
        )

    return create_error


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
