"""Value objects for offline sync domain."""

from .operation_kind import OperationKind
from .queued_operation import QueuedOperation

__all__ = ["OperationKind", "QueuedOperation"]
