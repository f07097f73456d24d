"""
API Gateway implementation of the Data Access Layer (DAL).

This module wraps the two API Gateway control plane calls needed to roll a
REST API stage forward: creating a deployment and repointing a stage at it.
"""

from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import ClientError

from service.dal import BaseDeploymentDalHandler
from service.handlers.utils.observability import logger, tracer

DEPLOYMENT_ID_PATH = '/deploymentId'


class ApiGatewayHandler(BaseDeploymentDalHandler):
    """API Gateway implementation of the data access layer."""

    def __init__(self, client: Any) -> None:
        """
        Initialize the API Gateway handler.

        Args:
            client: boto3 ``apigateway`` client, or a compatible test double
        """
        self.client = client

    @classmethod
    def from_region(cls, region_name: Optional[str] = None, endpoint_url: Optional[str] = None) -> 'ApiGatewayHandler':
        client = boto3.client('apigateway', region_name=region_name, endpoint_url=endpoint_url)
        logger.debug('API Gateway client initialized', extra={'region': client.meta.region_name})
        return cls(client)

    @tracer.capture_method
    def create_deployment(self, rest_api_id: str) -> str:
        """
        Create a new deployment snapshot of a REST API.

        Args:
            rest_api_id: Identifier of the REST API

        Returns:
            Id of the new deployment

        Raises:
            ClientError: If the API Gateway call fails
        """
        try:
            deployment = self.client.create_deployment(restApiId=rest_api_id)
        except ClientError as e:
            logger.error('API Gateway error creating deployment', extra={
                'error_code': e.response['Error']['Code'],
                'rest_api_id': rest_api_id,
            })
            raise

        logger.info('Created deployment', extra={'rest_api_id': rest_api_id, 'deployment_id': deployment['id']})
        tracer.put_annotation('deployment_id', deployment['id'])
        return deployment['id']

    @tracer.capture_method
    def update_stage(self, rest_api_id: str, stage_name: str, deployment_id: str) -> Dict[str, Any]:
        """
        Point a stage at the given deployment.

        Args:
            rest_api_id: Identifier of the REST API
            stage_name: Stage to update
            deployment_id: Deployment the stage should serve

        Returns:
            Updated stage descriptor

        Raises:
            ClientError: If the API Gateway call fails
        """
        try:
            stage = self.client.update_stage(
                restApiId=rest_api_id,
                stageName=stage_name,
                patchOperations=[
                    {
                        'op': 'replace',
                        'path': DEPLOYMENT_ID_PATH,
                        'value': deployment_id,
                    },
                ],
            )
        except ClientError as e:
            # the deployment created before this call is left in place
            logger.error('API Gateway error updating stage', extra={
                'error_code': e.response['Error']['Code'],
                'rest_api_id': rest_api_id,
                'stage_name': stage_name,
                'orphaned_deployment_id': deployment_id,
            })
            raise

        logger.info('Updated stage', extra={
            'rest_api_id': rest_api_id,
            'stage_name': stage_name,
            'deployment_id': deployment_id,
        })
        return stage
