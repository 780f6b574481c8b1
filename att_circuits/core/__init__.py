"""
att-circuits Core Data Structures

Type registry, logic components, the prefab model, the prefab catalog,
configuration and the error taxonomy used by the wiring layer.
"""

from .constants import (
    WireType,
    LogicSenderKind,
    LogicReceiverKind,
    LOGIC_GATE_RECEIVER,
    sender_kind_for,
    receiver_kind_for,
)
from .components import (
    LinkOutcome,
    LogicOperator,
    LogicComponent,
    LogicSenderComponent,
    LogicReceiverComponent,
    LogicSingleReceiverComponent,
    LogicGateReceiverComponent,
)
from .prefab import Prefab, PrefabChild, Vector3
from .catalog import PrefabCatalog, get_catalog
from .config import CircuitConfig, get_config, set_config, setup_logging
from .exceptions import (
    IssueSeverity,
    WiringIssue,
    CircuitError,
    UnknownWireTypeError,
    NoMatchingReceiverError,
    IncompatiblePrefabError,
    IncompatibleSenderError,
    IncompatibleReceiverError,
    CircuitFinalizedError,
    OriginNotSetError,
    UnknownOperatorError,
    CatalogError,
)

__all__ = [
    "WireType",
    "LogicSenderKind",
    "LogicReceiverKind",
    "LOGIC_GATE_RECEIVER",
    "sender_kind_for",
    "receiver_kind_for",
    "LinkOutcome",
    "LogicOperator",
    "LogicComponent",
    "LogicSenderComponent",
    "LogicReceiverComponent",
    "LogicSingleReceiverComponent",
    "LogicGateReceiverComponent",
    "Prefab",
    "PrefabChild",
    "Vector3",
    "PrefabCatalog",
    "get_catalog",
    "CircuitConfig",
    "get_config",
    "set_config",
    "setup_logging",
    "IssueSeverity",
    "WiringIssue",
    "CircuitError",
    "UnknownWireTypeError",
    "NoMatchingReceiverError",
    "IncompatiblePrefabError",
    "IncompatibleSenderError",
    "IncompatibleReceiverError",
    "CircuitFinalizedError",
    "OriginNotSetError",
    "UnknownOperatorError",
    "CatalogError",
]
