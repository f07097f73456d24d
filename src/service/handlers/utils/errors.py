"""
Error types and error reporting utilities for AWS Lambda handlers.

Remote API Gateway errors are not wrapped; they propagate as raised by
botocore so the provider framework reports the original message.
"""

import uuid
from enum import Enum
from typing import Any, Dict, List, Optional

from aws_lambda_powertools.metrics import MetricUnit

from service.handlers.utils.observability import logger, metrics, tracer


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"


class ServiceError(Exception):
    """Base exception class for service errors."""

    metric_name = "ServiceError"

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "category": self.category.value,
        }


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    metric_name = "ValidationError"

    def __init__(
        self,
        message: str,
        field_errors: Optional[List[Dict[str, str]]] = None,
    ):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            category=ErrorCategory.VALIDATION,
        )
        self.field_errors = field_errors or []

    def to_dict(self) -> Dict[str, Any]:
        error = super().to_dict()
        error["field_errors"] = self.field_errors
        return error


def log_error_metrics(error: ServiceError) -> None:
    """Log a service error and count it."""
    metrics.add_metric(name=error.metric_name, unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_metadata("error_details", error.to_dict())

    # "message" is a reserved LogRecord attribute
    logger.error(
        "Service error occurred",
        extra={
            "error_id": error.error_id,
            "error_code": error.error_code,
            "error_category": error.category.value,
            "error_message": error.message,
            "field_errors": getattr(error, "field_errors", None),
        }
    )
