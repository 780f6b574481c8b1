"""
Logic_Operator factory.

Builds a standalone Logic_Operator prefab with its gate receiver already
configured. The result can be wired like any other prefab.
"""

from typing import Union

from ..core.components import LogicGateReceiverComponent, LogicOperator
from ..core.constants import COMPONENT_VERSIONS, LOGIC_GATE_RECEIVER, OPERATOR_PREFAB_NAME
from ..core.exceptions import UnknownOperatorError
from ..core.prefab import Prefab


def create_operator(
    operator: Union[LogicOperator, str],
    is_inversed_output: bool = False,
) -> Prefab:
    """
    Create a Logic_Operator prefab.

    Args:
        operator: Gate operation, as LogicOperator or name ("And", "or", "XOR")
        is_inversed_output: Invert the gate output (NAND, NOR, XNOR)

    Returns:
        Logic_Operator prefab carrying a configured LogicGateReceiver

    Example:
        nand = create_operator("And", is_inversed_output=True)
        circuit.create_wire("boolean").connect(lever, nand)
    """
    if isinstance(operator, LogicOperator):
        operation_type = operator
    else:
        try:
            operation_type = LogicOperator[str(operator).upper()]
        except KeyError:
            raise UnknownOperatorError(
                operator, known=[op.name.capitalize() for op in LogicOperator]
            ) from None

    return Prefab(OPERATOR_PREFAB_NAME).add_component(
        LogicGateReceiverComponent(
            version=COMPONENT_VERSIONS[LOGIC_GATE_RECEIVER],
            operation_type=operation_type,
            is_inversed_output_saved=is_inversed_output,
        )
    )
