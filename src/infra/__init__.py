"""
Infrastructure definition of the REST API and its redeploy custom resource.
"""

from infra.api_deploy_stack import ApiDeployStack
from infra.config import StackConfig

__all__ = [
    "ApiDeployStack",
    "StackConfig",
]
