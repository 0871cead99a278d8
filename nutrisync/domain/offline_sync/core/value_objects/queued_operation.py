"""QueuedOperation value object - a remote mutation awaiting replay."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

from pydantic_core import to_jsonable_python

from .operation_kind import OperationKind


@dataclass(frozen=True)
class QueuedOperation:
    """A create/update/delete that could not be applied immediately.

    Payload shapes:
        INSERT: the full record
        UPDATE: ``{"id": ..., "updates": {...}}``
        DELETE: ``{"id": ...}``

    Operations whose payload lacks these keys are still valid queue
    entries (older clients persisted such shapes); ``replay_problem``
    reports why they cannot be replayed.

    Attributes:
        kind: Mutation type
        target: Table the mutation applies to
        payload: Data needed to replay the mutation
        enqueued_at: When the mutation was first queued (UTC)
        attempts: Failed replay attempts so far
        operation_id: Identifier used in logs
    """

    kind: OperationKind
    target: str
    payload: Dict[str, Any]
    enqueued_at: datetime
    attempts: int = 0
    operation_id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self) -> None:
        """Validate the operation structure.

        Raises:
            InvalidOperationError: If kind, target, payload type or attempts are invalid
        """
        from ..exceptions.domain_errors import InvalidOperationError

        if not isinstance(self.kind, OperationKind):
            raise InvalidOperationError(f"Unknown operation kind: {self.kind!r}")

        if not isinstance(self.target, str) or not self.target:
            raise InvalidOperationError("Operation target table must be a non-empty string")

        if not isinstance(self.payload, dict):
            raise InvalidOperationError(
                f"Payload must be a mapping, got {type(self.payload).__name__}"
            )

        if self.attempts < 0:
            raise InvalidOperationError(f"Attempts must be non-negative, got {self.attempts}")

    @classmethod
    def create(
        cls,
        kind: Any,
        target: str,
        payload: Mapping[str, Any],
        now: Optional[datetime] = None,
    ) -> "QueuedOperation":
        """Build a fresh operation stamped with the current time.

        The payload is converted to JSON-compatible values (datetimes and
        UUIDs become ISO strings, unknown objects their ``str()``) so the
        queue can always be persisted.

        Raises:
            InvalidOperationError: If kind or target is invalid, or the
                payload is not a mapping
        """
        from ..exceptions.domain_errors import InvalidOperationError

        try:
            op_kind = OperationKind(kind)
        except ValueError:
            raise InvalidOperationError(f"Unknown operation kind: {kind!r}") from None

        if not isinstance(payload, Mapping):
            raise InvalidOperationError(
                f"Payload must be a mapping, got {type(payload).__name__}"
            )

        return cls(
            kind=op_kind,
            target=target,
            payload=to_jsonable_python(dict(payload), serialize_unknown=True),
            enqueued_at=now or datetime.now(timezone.utc),
        )

    @property
    def record_id(self) -> Any:
        """Identifier of the affected row (None for inserts)."""
        if self.kind is OperationKind.INSERT:
            return None
        return self.payload.get("id")

    @property
    def updates(self) -> Dict[str, Any]:
        """Partial update for UPDATE operations."""
        return dict(self.payload.get("updates") or {})

    @property
    def replay_problem(self) -> Optional[str]:
        """Why the payload cannot be replayed, or None if it can."""
        if self.kind is OperationKind.INSERT:
            return None
        if self.payload.get("id") is None:
            return f"{self.kind.value} on {self.target} has no 'id' in its payload"
        if self.kind is OperationKind.UPDATE and not isinstance(
            self.payload.get("updates"), dict
        ):
            return f"update on {self.target} has no 'updates' mapping"
        return None

    @property
    def is_replayable(self) -> bool:
        return self.replay_problem is None

    def with_failed_attempt(self) -> "QueuedOperation":
        """Return a copy with the attempt counter incremented."""
        return replace(self, attempts=self.attempts + 1)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to the persisted queue format."""
        return {
            "operation": self.kind.value,
            "table": self.target,
            "data": self.payload,
            "timestamp": int(self.enqueued_at.timestamp() * 1000),
            "attempts": self.attempts,
            "id": self.operation_id,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QueuedOperation":
        """Restore an operation from its persisted form.

        Entries written without ``attempts``/``id`` are accepted.

        Raises:
            InvalidOperationError: If the entry is malformed
        """
        from ..exceptions.domain_errors import InvalidOperationError

        if not isinstance(data, Mapping):
            raise InvalidOperationError(
                f"Queued entry must be an object, got {type(data).__name__}"
            )

        try:
            kind = OperationKind(data["operation"])
            target = data["table"]
            payload = data["data"]
            timestamp_ms = data.get("timestamp")
            attempts = int(data.get("attempts", 0))
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidOperationError(f"Malformed queued entry: {e}") from e

        if isinstance(timestamp_ms, (int, float)) and not isinstance(timestamp_ms, bool):
            enqueued_at = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
        else:
            enqueued_at = datetime.now(timezone.utc)

        kwargs: Dict[str, Any] = {}
        if data.get("id"):
            kwargs["operation_id"] = str(data["id"])

        return cls(
            kind=kind,
            target=target,
            payload=payload,
            enqueued_at=enqueued_at,
            attempts=attempts,
            **kwargs,
        )
