"""
Logic type registry.

Static lookup tables tying wire types to the logic sender that emits them,
and each sender to the receiver that listens for it. Also records the
component version tag written for every logic component kind.
"""

from enum import Enum
from typing import Dict, Optional, Union


class WireType(Enum):
    """Signal kinds a wire can carry."""
    BOOLEAN = "boolean"
    FLOAT = "float"
    INTEGER = "integer"
    VECTOR3 = "vector3"


class LogicSenderKind(Enum):
    """Logic sender components, by their save-format name."""
    BOOL = "LogicBoolSender"
    FLOAT = "LogicFloatSender"
    INT = "LogicIntSender"
    VECTOR3 = "LogicVector3Sender"


class LogicReceiverKind(Enum):
    """Logic receiver components, by their save-format name."""
    BOOL = "LogicBoolReceiver"
    FLOAT = "LogicFloatReceiver"
    INT = "LogicIntReceiver"
    VECTOR3 = "LogicVector3Receiver"
    GATE = "LogicGateReceiver"     # Accepts any wire type, holds many senders


ComponentKind = Union[LogicSenderKind, LogicReceiverKind]

LOGIC_GATE_RECEIVER = LogicReceiverKind.GATE

CONTEXT_PREFAB_NAME = "Logic_Context"
OPERATOR_PREFAB_NAME = "Logic_Operator"

WIRES: Dict[WireType, LogicSenderKind] = {
    WireType.BOOLEAN: LogicSenderKind.BOOL,
    WireType.FLOAT: LogicSenderKind.FLOAT,
    WireType.INTEGER: LogicSenderKind.INT,
    WireType.VECTOR3: LogicSenderKind.VECTOR3,
}

RECEIVERS: Dict[LogicSenderKind, LogicReceiverKind] = {
    LogicSenderKind.BOOL: LogicReceiverKind.BOOL,
    LogicSenderKind.FLOAT: LogicReceiverKind.FLOAT,
    LogicSenderKind.INT: LogicReceiverKind.INT,
    LogicSenderKind.VECTOR3: LogicReceiverKind.VECTOR3,
}

COMPONENT_VERSIONS: Dict[Enum, int] = {
    LogicSenderKind.BOOL: 2,
    LogicSenderKind.FLOAT: 1,
    LogicSenderKind.INT: 1,
    LogicSenderKind.VECTOR3: 1,
    LogicReceiverKind.BOOL: 1,
    LogicReceiverKind.FLOAT: 1,
    LogicReceiverKind.INT: 1,
    LogicReceiverKind.VECTOR3: 1,
    LogicReceiverKind.GATE: 2,
}


def parse_wire_type(value: Union[WireType, str]) -> Optional[WireType]:
    """Return the WireType for an enum member or its string value."""
    if isinstance(value, WireType):
        return value
    try:
        return WireType(value)
    except ValueError:
        return None


def parse_component_kind(value: Union[ComponentKind, str]) -> Optional[ComponentKind]:
    """Return the sender or receiver kind named by `value`, if any."""
    if isinstance(value, (LogicSenderKind, LogicReceiverKind)):
        return value
    for enum_cls in (LogicSenderKind, LogicReceiverKind):
        try:
            return enum_cls(value)
        except ValueError:
            continue
    return None


def sender_kind_for(wire_type: Union[WireType, str]) -> Optional[LogicSenderKind]:
    """Sender component kind that emits signals of `wire_type`."""
    parsed = parse_wire_type(wire_type)
    if parsed is None:
        return None
    return WIRES.get(parsed)


def receiver_kind_for(sender_kind: Union[LogicSenderKind, str]) -> Optional[LogicReceiverKind]:
    """Receiver component kind that listens to `sender_kind`."""
    if not isinstance(sender_kind, LogicSenderKind):
        try:
            sender_kind = LogicSenderKind(sender_kind)
        except ValueError:
            return None
    return RECEIVERS.get(sender_kind)
