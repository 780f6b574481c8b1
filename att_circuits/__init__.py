"""
att-circuits - Logic circuit builder for A Township Tale prefabs

Connects logic senders (levers, pressure plates, wheels) to logic
receivers (gates, doors, operators) and bakes the result into a single
Logic_Context prefab:

1. Type registry: wire type -> sender kind -> receiver kind
2. Wire: resolves or creates sender/receiver components and links them
3. Circuit: issues sender identifiers, tracks wired prefabs and re-homes
   them under one origin

Usage:
    from att_circuits import Circuit, Prefab

    lever = Prefab("MRK_Small_Lever")
    door = Prefab("MRK_gate_02").set_position((69, 420, 1337))

    circuit = Circuit()
    circuit.create_wire("boolean").connect(lever, door)
    circuit.set_origin(door)

    context = circuit.finalize()

Author: ATT Circuits Team
Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "ATT Circuits Team"

# Core data structures
from .core import (
    WireType,
    LogicSenderKind,
    LogicReceiverKind,
    LinkOutcome,
    LogicOperator,
    Prefab,
    PrefabChild,
    Vector3,
    PrefabCatalog,
    CircuitConfig,
    get_config,
    set_config,
    setup_logging,
    WiringIssue,
    CircuitError,
)

# Wiring
from .wiring import (
    Wire,
    Circuit,
    create_operator,
)

__all__ = [
    # Version
    "__version__",

    # Core
    "WireType",
    "LogicSenderKind",
    "LogicReceiverKind",
    "LinkOutcome",
    "LogicOperator",
    "Prefab",
    "PrefabChild",
    "Vector3",
    "PrefabCatalog",
    "CircuitConfig",
    "get_config",
    "set_config",
    "setup_logging",
    "WiringIssue",
    "CircuitError",

    # Wiring
    "Wire",
    "Circuit",
    "create_operator",
]
