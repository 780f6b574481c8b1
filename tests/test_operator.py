"""
Tests for create_operator.
"""

import pytest

from att_circuits import LogicOperator, create_operator
from att_circuits.core.exceptions import UnknownOperatorError


class TestCreateOperator:

    def test_required_arguments(self):
        prefab = create_operator("And")
        gate = prefab.get_component("LogicGateReceiver")

        assert prefab.name == "Logic_Operator"
        assert gate.operation_type == LogicOperator.AND
        assert gate.is_inversed_output_saved is False
        assert gate.senders == []
        assert gate.version == 2

    def test_additional_arguments(self):
        prefab = create_operator("Xor", True)
        gate = prefab.get_component("LogicGateReceiver")

        assert gate.operation_type == LogicOperator.XOR
        assert gate.is_inversed_output_saved is True

    def test_accepts_enum(self):
        prefab = create_operator(LogicOperator.OR)

        assert prefab.get_component("LogicGateReceiver").operation_type == LogicOperator.OR

    def test_unknown_operator(self):
        with pytest.raises(UnknownOperatorError) as exc_info:
            create_operator("Implies")

        assert exc_info.value.context["known_operators"] == ["And", "Or", "Xor"]

    def test_operators_are_independent(self):
        first = create_operator("And")
        second = create_operator("And")

        first.get_component("LogicGateReceiver").senders.append(1)

        assert second.get_component("LogicGateReceiver").senders == []
