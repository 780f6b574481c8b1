"""
att-circuits wiring layer.

Wires connect logic senders to logic receivers; a Circuit owns the wires,
issues sender identifiers and bakes everything into one Logic_Context.
"""

from .wire import Wire
from .circuit import Circuit
from .logic_operator import create_operator

__all__ = [
    "Wire",
    "Circuit",
    "create_operator",
]
