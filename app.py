#!/usr/bin/env python3

from aws_cdk import App, Tags

from infra.api_deploy_stack import ApiDeployStack
from infra.config import StackConfig


app = App()

# Fails synthesis on invalid context values
config = StackConfig.from_context(app.node)

# The REST API and its redeploy custom resource
ApiDeployStack(
    app,
    "CdkCustomResourceStack",
    config=config,
    description="REST API redeployed by a custom resource on every stack update",
)

# Stack Level Tagging
Tags.of(app).add("Project", config.prefix)

app.synth()
