"""
API Gateway Custom Resource - Source Package

This package contains the Lambda functions and CDK stack of a REST API whose
stage is redeployed by a custom resource on every stack create or update.
"""

__version__ = "1.0.0"

# Package metadata
__all__ = [
    "__version__",
]
