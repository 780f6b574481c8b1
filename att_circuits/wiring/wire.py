"""
Wire - Connects a logic sender on one prefab to a logic receiver on another.

A wire carries one signal type. Connecting two prefabs:
1. Reuses or creates the sender matching the wire type (new senders get a
   fresh identifier from the circuit)
2. Reuses the matching receiver or an existing gate receiver, otherwise
   creates the matching receiver, falling back to a gate receiver
3. Links the receiver to the sender's identifier, reporting conflicts as
   wiring issues instead of failing
4. Tracks both prefabs on the circuit

Usage:
    circuit = Circuit()
    wire = circuit.create_wire("boolean")  # or Wire("boolean", circuit)
    wire.connect(lever, door)
"""

import logging
from typing import TYPE_CHECKING, Union

from ..core import constants
from ..core.components import (
    LinkOutcome,
    LogicReceiverComponent,
    LogicSenderComponent,
    create_receiver,
    create_sender,
)
from ..core.constants import LogicReceiverKind, LogicSenderKind, WireType
from ..core.exceptions import (
    CircuitFinalizedError,
    IncompatibleReceiverError,
    IncompatibleSenderError,
    IssueSeverity,
    NoMatchingReceiverError,
    UnknownWireTypeError,
    WiringIssue,
)
from ..core.prefab import Prefab

if TYPE_CHECKING:
    from .circuit import Circuit

logger = logging.getLogger(__name__)

# Conflict messages by link outcome
LINK_WARNINGS = {
    LinkOutcome.DUPLICATE: "The {receiver} on {prefab} is already wired up to this sender.",
    LinkOutcome.OVERWRITTEN: "The {receiver} on {prefab} was already wired up to something else.",
}


class Wire:
    """
    A conduit of one signal type between logic senders and receivers.

    A wire belongs to the circuit passed at construction; every prefab it
    connects is tracked by that circuit.
    """

    def __init__(self, wire_type: Union[WireType, str], circuit: "Circuit"):
        """
        Args:
            wire_type: "boolean", "float", "integer" or "vector3" (or WireType)
            circuit: Circuit that issues identifiers and tracks prefabs

        Raises:
            UnknownWireTypeError: wire_type is not a known signal kind
            NoMatchingReceiverError: registry has no receiver for the sender kind
        """
        sender_kind = constants.sender_kind_for(wire_type)
        if sender_kind is None:
            raise UnknownWireTypeError(getattr(wire_type, "value", wire_type))

        receiver_kind = constants.receiver_kind_for(sender_kind)
        if receiver_kind is None:
            raise NoMatchingReceiverError(sender_kind.value)

        self._circuit = circuit
        self._sender_kind = sender_kind
        self._receiver_kind = receiver_kind
        self._type = constants.parse_wire_type(wire_type)

    @property
    def circuit(self) -> "Circuit":
        return self._circuit

    @property
    def type(self) -> WireType:
        return self._type

    @property
    def sender_kind(self) -> LogicSenderKind:
        return self._sender_kind

    @property
    def receiver_kind(self) -> LogicReceiverKind:
        return self._receiver_kind

    def connect(self, sender: Prefab, receiver: Prefab) -> None:
        """
        Wire the logic sender of `sender` into the logic receiver of `receiver`.

        Raises:
            IncompatibleSenderError: `sender` cannot host this wire's sender
            IncompatibleReceiverError: `receiver` can host neither this wire's
                receiver nor a gate receiver

        A sender created for this call stays on `sender` even when the
        receiver side then fails.
        """
        if self._circuit.is_finalized:
            raise CircuitFinalizedError("connect")

        logic_sender = self._get_logic_sender(sender)
        logic_receiver = self._get_logic_receiver(receiver)

        outcome = logic_receiver.link(logic_sender.identifier)

        # Both ends are tracked before any issue reaches the sink
        self._circuit.track(sender)
        self._circuit.track(receiver)

        logger.debug(
            f"Connected {sender.name}.{logic_sender.name}#{logic_sender.identifier} "
            f"-> {receiver.name}.{logic_receiver.name} ({outcome.value})"
        )

        if outcome in LINK_WARNINGS:
            self._circuit.report(WiringIssue(
                message=LINK_WARNINGS[outcome].format(
                    receiver=logic_receiver.name,
                    prefab=receiver.name,
                ),
                severity=IssueSeverity.WARNING,
                receiver=logic_receiver.name,
                prefab_name=receiver.name,
                outcome=outcome.value,
            ))

    def _get_logic_sender(self, prefab: Prefab) -> LogicSenderComponent:
        """Returns the logic sender matching this wire's type of the given prefab."""
        logic_sender = prefab.components.get(self._sender_kind)
        if logic_sender is not None:
            return logic_sender

        if not self._circuit.catalog.supports(self._sender_kind, prefab.name):
            raise IncompatibleSenderError(prefab.name, self._type.value, self._sender_kind.value)

        identifier = self._circuit.issue_identifier()
        logic_sender = create_sender(self._sender_kind, identifier)
        prefab.add_component(logic_sender)
        return logic_sender

    def _get_logic_receiver(self, prefab: Prefab) -> LogicReceiverComponent:
        """Returns the logic receiver matching this wire's type of the given prefab."""
        logic_receiver = prefab.components.get(self._receiver_kind)
        if logic_receiver is None:
            logic_receiver = prefab.components.get(LogicReceiverKind.GATE)
        if logic_receiver is not None:
            return logic_receiver

        receiver_kind = self._receiver_kind
        catalog = self._circuit.catalog
        if not catalog.supports(receiver_kind, prefab.name):
            receiver_kind = LogicReceiverKind.GATE
            if not catalog.supports(receiver_kind, prefab.name):
                raise IncompatibleReceiverError(
                    prefab.name, self._type.value, self._receiver_kind.value
                )

        logic_receiver = create_receiver(receiver_kind)
        prefab.add_component(logic_receiver)
        return logic_receiver

    def __repr__(self) -> str:
        return f"Wire(type={self._type.value!r}, sender={self._sender_kind.value}, receiver={self._receiver_kind.value})"
