"""OperationKind value object."""

from enum import Enum


class OperationKind(str, Enum):
    """Type of remote mutation held in the offline queue."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
