"""
CDK Stack for a REST API redeployed by a custom resource.

The sample function serves GET / on the REST API. The deploy function backs
a custom resource whose uuid property changes on every synthesis, so each
stack deployment makes CloudFormation call it and roll the stage forward.
"""
from pathlib import Path

from aws_cdk import (
    BundlingOptions,
    CfnOutput,
    CustomResource,
    Duration,
    Stack,
    aws_apigateway as apigw,
    aws_iam as iam,
    aws_lambda as lambda_,
    custom_resources as cr,
)
from constructs import Construct

from infra.config import StackConfig

# Lambda asset root, holds the function packages and the service package
SRC_DIR = Path(__file__).resolve().parent.parent

ASSET_EXCLUDES = [
    "infra",
    "**/test_*.py",
    "**/__pycache__",
]

SAMPLE_HANDLER = "hello.lambda_function.lambda_handler"
DEPLOY_HANDLER = "deploy_apigateway.lambda_function.lambda_handler"


class ApiDeployStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, config: StackConfig, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.config = config

        api = apigw.RestApi(
            self,
            "RestAPI",
            rest_api_name=config.api_name,
            deploy_options=apigw.StageOptions(stage_name=config.stage_name),
        )

        code = lambda_.Code.from_asset(
            str(SRC_DIR),
            exclude=ASSET_EXCLUDES,
            bundling=BundlingOptions(
                image=lambda_.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install -r requirements.txt -t /asset-output && cp -au . /asset-output"
                ],
            ),
        )

        sample_function = lambda_.Function(
            self,
            "SampleFunction",
            function_name=config.sample_function_name,
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler=SAMPLE_HANDLER,
            code=code,
            timeout=Duration.seconds(config.timeout_seconds),
            memory_size=config.memory_size,
            environment={
                "POWERTOOLS_SERVICE_NAME": config.sample_function_name,
                "LOG_LEVEL": config.log_level,
            },
        )

        # GET / served by the sample function
        api.root.add_method("GET", apigw.LambdaIntegration(sample_function))

        deploy_function = lambda_.Function(
            self,
            "DeployFunction",
            function_name=config.deploy_function_name,
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler=DEPLOY_HANDLER,
            code=code,
            timeout=Duration.seconds(config.timeout_seconds),
            memory_size=config.memory_size,
            environment={
                "POWERTOOLS_SERVICE_NAME": config.deploy_function_name,
                "LOG_LEVEL": config.log_level,
            },
        )

        provider = cr.Provider(
            self,
            "Provider",
            on_event_handler=deploy_function,
        )

        # CreateDeployment is a POST and UpdateStage a PATCH on the REST API path
        provider.on_event_handler.add_to_role_policy(
            iam.PolicyStatement(
                actions=["apigateway:POST", "apigateway:PATCH"],
                effect=iam.Effect.ALLOW,
                resources=[
                    f"arn:aws:apigateway:{self.region}::/restapis/{api.rest_api_id}/*"
                ],
            )
        )

        custom_resource = CustomResource(
            self,
            "CustomResource",
            service_token=provider.service_token,
            properties={
                "uuid": config.correlation_token,
                "API_ID": api.rest_api_id,
                "API_STAGE": api.deployment_stage.stage_name,
            },
        )

        self.api = api
        self.sample_function = sample_function
        self.deploy_function = deploy_function
        self.custom_resource = custom_resource

        # Outputs
        CfnOutput(
            self,
            "ApiUrl",
            value=api.url,
            description="URL of the deployed API stage",
        )

        CfnOutput(
            self,
            "DeploymentId",
            value=custom_resource.ref,
            description="Deployment the stage was last pointed at by the custom resource",
        )
