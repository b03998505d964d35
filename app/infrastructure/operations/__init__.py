"""Operation result types and status enums.

Standardized result types returned by the AWS client layer so callers can
branch on outcome without catching botocore exceptions.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
