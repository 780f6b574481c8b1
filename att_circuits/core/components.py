"""
Logic Components - Sender and receiver components hosted by prefabs.

Senders carry a circuit-unique identifier. Receivers point back at the
identifier(s) of the sender(s) wired into them:

- Single receivers (bool/float/int/vector3) hold one `sender` (0 = unset)
- The gate receiver holds an ordered list of `senders` plus the gate's
  operation and output inversion flag

Both receiver variants expose `link(identifier)`, which records a sender
and returns a LinkOutcome describing what happened.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Type

from .constants import (
    COMPONENT_VERSIONS,
    ComponentKind,
    LogicReceiverKind,
    LogicSenderKind,
)

logger = logging.getLogger(__name__)


class LogicOperator(Enum):
    """Operation performed by a Logic_Operator gate."""
    AND = 0
    OR = 1
    XOR = 2


class LinkOutcome(Enum):
    """Result of recording a sender on a receiver."""
    LINKED = "linked"              # New link recorded
    DUPLICATE = "duplicate"        # Gate already listed this sender, nothing changed
    OVERWRITTEN = "overwritten"    # Single receiver dropped its previous sender


@dataclass
class LogicComponent:
    """Base class for every logic component."""
    kind: ClassVar[ComponentKind]
    version: int = 1

    @property
    def name(self) -> str:
        return self.kind.value

    def to_dict(self) -> Dict:
        return {"name": self.name, "version": self.version}


# ============================================================================
# Senders
# ============================================================================

@dataclass
class LogicSenderComponent(LogicComponent):
    """A component that emits signals under a circuit-unique identifier."""
    kind: ClassVar[LogicSenderKind]
    identifier: int = 0

    def to_dict(self) -> Dict:
        data = super().to_dict()
        data["identifier"] = self.identifier
        return data


@dataclass
class LogicBoolSenderComponent(LogicSenderComponent):
    kind: ClassVar[LogicSenderKind] = LogicSenderKind.BOOL


@dataclass
class LogicFloatSenderComponent(LogicSenderComponent):
    kind: ClassVar[LogicSenderKind] = LogicSenderKind.FLOAT


@dataclass
class LogicIntSenderComponent(LogicSenderComponent):
    kind: ClassVar[LogicSenderKind] = LogicSenderKind.INT


@dataclass
class LogicVector3SenderComponent(LogicSenderComponent):
    kind: ClassVar[LogicSenderKind] = LogicSenderKind.VECTOR3


# ============================================================================
# Receivers
# ============================================================================

@dataclass
class LogicReceiverComponent(LogicComponent, ABC):
    """A component that listens to one or more senders."""
    kind: ClassVar[LogicReceiverKind]

    @abstractmethod
    def link(self, identifier: int) -> LinkOutcome:
        """Record `identifier` as a sender of this receiver."""


@dataclass
class LogicSingleReceiverComponent(LogicReceiverComponent):
    """Receiver wired to exactly one sender. Relinking replaces the sender."""
    sender: int = 0

    def link(self, identifier: int) -> LinkOutcome:
        outcome = LinkOutcome.OVERWRITTEN if self.sender > 0 else LinkOutcome.LINKED
        self.sender = identifier
        return outcome

    def to_dict(self) -> Dict:
        data = super().to_dict()
        data["sender"] = self.sender
        return data


@dataclass
class LogicBoolReceiverComponent(LogicSingleReceiverComponent):
    kind: ClassVar[LogicReceiverKind] = LogicReceiverKind.BOOL


@dataclass
class LogicFloatReceiverComponent(LogicSingleReceiverComponent):
    kind: ClassVar[LogicReceiverKind] = LogicReceiverKind.FLOAT


@dataclass
class LogicIntReceiverComponent(LogicSingleReceiverComponent):
    kind: ClassVar[LogicReceiverKind] = LogicReceiverKind.INT


@dataclass
class LogicVector3ReceiverComponent(LogicSingleReceiverComponent):
    kind: ClassVar[LogicReceiverKind] = LogicReceiverKind.VECTOR3


@dataclass
class LogicGateReceiverComponent(LogicReceiverComponent):
    """
    Gate receiver of a Logic_Operator.

    Accepts senders of any wire type. `senders` keeps connection order
    and never holds the same identifier twice.
    """
    kind: ClassVar[LogicReceiverKind] = LogicReceiverKind.GATE
    version: int = 2
    senders: List[int] = field(default_factory=list)
    operation_type: LogicOperator = LogicOperator.AND
    is_inversed_output_saved: bool = False

    def link(self, identifier: int) -> LinkOutcome:
        if identifier in self.senders:
            return LinkOutcome.DUPLICATE
        self.senders.append(identifier)
        return LinkOutcome.LINKED

    def to_dict(self) -> Dict:
        data = super().to_dict()
        data.update({
            "senders": list(self.senders),
            "operation_type": self.operation_type.name,
            "is_inversed_output_saved": self.is_inversed_output_saved,
        })
        return data


COMPONENT_CLASSES: Dict[ComponentKind, Type[LogicComponent]] = {
    cls.kind: cls
    for cls in (
        LogicBoolSenderComponent,
        LogicFloatSenderComponent,
        LogicIntSenderComponent,
        LogicVector3SenderComponent,
        LogicBoolReceiverComponent,
        LogicFloatReceiverComponent,
        LogicIntReceiverComponent,
        LogicVector3ReceiverComponent,
        LogicGateReceiverComponent,
    )
}


def create_sender(kind: LogicSenderKind, identifier: int) -> LogicSenderComponent:
    """Build a sender of `kind` with its registered version tag."""
    component = COMPONENT_CLASSES[kind](version=COMPONENT_VERSIONS[kind], identifier=identifier)
    logger.debug(f"Created {kind.value} v{component.version} with identifier {identifier}")
    return component


def create_receiver(kind: LogicReceiverKind) -> LogicReceiverComponent:
    """Build an unwired receiver of `kind` with its registered version tag."""
    component = COMPONENT_CLASSES[kind](version=COMPONENT_VERSIONS[kind])
    logger.debug(f"Created {kind.value} v{component.version}")
    return component
