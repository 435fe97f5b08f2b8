"""API schema models."""

from .errors import ErrorDetail, ErrorResponse
from .system import HealthResponse, ServiceInfo

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "ServiceInfo",
]
