"""
Circuit Exceptions - Errors raised while wiring and baking circuits.

Configuration mistakes (unknown wire types, prefabs that cannot host a
logic component, misuse of a finalized circuit) raise exceptions and abort
the call. Wiring conflicts are NOT exceptions: they are reported as
WiringIssue records through the circuit's issue sink and the connection
still goes through.

Usage:
    from att_circuits.core.exceptions import (
        CircuitError,
        IncompatibleSenderError,
        OriginNotSetError,
    )

    try:
        wire.connect(anvil, door)
    except IncompatibleSenderError as e:
        print(f"Cannot wire {e.context['prefab']}: {e}")
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class IssueSeverity(Enum):
    """Severity levels for wiring issues."""
    WARNING = "warning"      # Connection made, but something was overwritten or ignored


@dataclass
class WiringIssue:
    """A non-fatal conflict detected while connecting two prefabs."""
    message: str
    severity: IssueSeverity
    receiver: str                       # Receiver component name, e.g. "LogicBoolReceiver"
    prefab_name: str                    # Name of the prefab hosting the receiver
    outcome: Optional[str] = None       # LinkOutcome value that produced this issue

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "severity": self.severity.value,
            "receiver": self.receiver,
            "prefab_name": self.prefab_name,
            "outcome": self.outcome,
        }


def log_wiring_issue(issue: WiringIssue) -> None:
    """Default issue sink: write the issue to the package logger."""
    logger.warning(issue.message)


class CircuitError(Exception):
    """
    Base circuit error - aborts the call that raised it.

    All circuit errors inherit from this class, allowing catch-all
    handling while preserving specific error types.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class UnknownWireTypeError(CircuitError):
    """No sender kind is registered for the requested wire type."""

    def __init__(self, wire_type: Any):
        super().__init__(
            f'Unrecognised wire type "{wire_type}".',
            context={"wire_type": str(wire_type)},
        )


class NoMatchingReceiverError(CircuitError):
    """
    A sender kind has no receiver kind registered for it.

    Points at an inconsistent type registry rather than a caller mistake.
    """

    def __init__(self, sender_kind: str):
        super().__init__(
            f'Cannot find matching LogicReceiver for "{sender_kind}".',
            context={"sender_kind": sender_kind},
        )


class IncompatiblePrefabError(CircuitError):
    """A prefab cannot host the logic component a wire needs."""

    direction = "use"

    def __init__(self, prefab_name: str, wire_type: str, component: str):
        super().__init__(
            f"{prefab_name} cannot {self.direction} {wire_type} signals. "
            f"Did you create the correct Wire type?",
            context={
                "prefab": prefab_name,
                "wire_type": wire_type,
                "component": component,
            },
        )


class IncompatibleSenderError(IncompatiblePrefabError):
    """The sender prefab cannot host the wire's logic sender."""

    direction = "send"


class IncompatibleReceiverError(IncompatiblePrefabError):
    """The receiver prefab can host neither the wire's receiver nor a gate receiver."""

    direction = "receive"


class CircuitFinalizedError(CircuitError):
    """The circuit has already been baked into its Logic_Context prefab."""

    def __init__(self, operation: str, message: Optional[str] = None):
        super().__init__(
            message or "This Circuit has already been converted to a Prefab.",
            context={"operation": operation},
        )


class OriginNotSetError(CircuitError):
    """finalize() was called while the circuit origin is still the zero vector."""

    def __init__(self):
        super().__init__(
            "You need to set the Circuit origin first to preserve the relative "
            "positioning of prefabs. Call Circuit.set_origin(prefab) where `prefab` "
            "acts as the origin position for this Circuit."
        )


class UnknownOperatorError(CircuitError):
    """The requested logic gate operation does not exist."""

    def __init__(self, operator: Any, known: Optional[list] = None):
        super().__init__(
            f'Unrecognised logic operator "{operator}".',
            context={"operator": str(operator), "known_operators": known or []},
        )


class CatalogError(CircuitError):
    """The prefab catalog file is missing or malformed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            f"Prefab catalog error: {message}",
            context={"path": path},
        )


__all__ = [
    'IssueSeverity',
    'WiringIssue',
    'log_wiring_issue',
    'CircuitError',
    'UnknownWireTypeError',
    'NoMatchingReceiverError',
    'IncompatiblePrefabError',
    'IncompatibleSenderError',
    'IncompatibleReceiverError',
    'CircuitFinalizedError',
    'OriginNotSetError',
    'UnknownOperatorError',
    'CatalogError',
]
