"""
Tests for Circuit - identifier issuance, origin handling and finalization.
"""

import pytest

from att_circuits import Circuit, CircuitConfig, Prefab, PrefabCatalog, Vector3, Wire
from att_circuits.core.exceptions import CircuitFinalizedError, OriginNotSetError

ORIGIN = Vector3(69, 420, 1337)


def finalized_circuit() -> Circuit:
    circuit = Circuit()
    circuit.set_origin(Prefab("Anvil").set_position(ORIGIN))
    circuit.finalize()
    return circuit


class TestCircuitConstruction:
    """Tests for Circuit.__init__."""

    def test_defaults(self):
        circuit = Circuit()

        assert circuit.context.name == "Logic_Context"
        assert circuit.context.position == Vector3(0, 0, 0)
        assert circuit.prefabs == []
        assert circuit.issues == []
        assert not circuit.is_finalized

    def test_initial_position(self):
        circuit = Circuit(position={"x": 69, "y": 420, "z": 1337})

        assert circuit.context.position == ORIGIN

    def test_context_name_from_config(self):
        circuit = Circuit(config=CircuitConfig(context_prefab_name="Custom_Context"))

        assert circuit.context.name == "Custom_Context"

    def test_explicit_catalog(self):
        catalog = PrefabCatalog({"Anvil": []})
        circuit = Circuit(catalog=catalog)

        assert circuit.catalog is catalog


class TestCreateWire:
    """Tests for Circuit.create_wire."""

    def test_returns_wire(self):
        circuit = Circuit()
        wire = circuit.create_wire("boolean")

        assert isinstance(wire, Wire)
        assert wire.circuit is circuit

    def test_after_finalize(self):
        circuit = finalized_circuit()

        with pytest.raises(CircuitFinalizedError, match="This Circuit has already been converted to a Prefab."):
            circuit.create_wire("boolean")


class TestIssueIdentifier:
    """Tests for Circuit.issue_identifier."""

    def test_strictly_increasing_from_one(self):
        circuit = Circuit()

        assert [circuit.issue_identifier() for _ in range(4)] == [1, 2, 3, 4]

    def test_unique_across_wire_types(self):
        circuit = Circuit()
        senders = [
            ("boolean", Prefab("MRK_Small_Lever"), Prefab("MRK_gate_02")),
            ("float", Prefab("MRK_Wheel_Bridge"), Prefab("MRK_Wheel_Bridge")),
            ("integer", Prefab("Area_of_Influence_Sender_puzzle"), Prefab("Logic_Int_To_Bool")),
            ("vector3", Prefab("Teleporter_Puzzle"), Prefab("Teleporter_Puzzle")),
        ]

        for wire_type, sender, receiver in senders:
            circuit.create_wire(wire_type).connect(sender, receiver)

        identifiers = [
            component.identifier
            for _, sender, _ in senders
            for component in sender.components.values()
        ]
        assert identifiers == [1, 2, 3, 4]

    def test_circuits_count_independently(self):
        first, second = Circuit(), Circuit()

        first.issue_identifier()
        first.issue_identifier()

        assert second.issue_identifier() == 1

    def test_after_finalize(self):
        circuit = finalized_circuit()

        with pytest.raises(CircuitFinalizedError):
            circuit.issue_identifier()


class TestSetOrigin:
    """Tests for Circuit.set_origin."""

    def test_copies_position(self):
        prefab = Prefab("Anvil").set_position(ORIGIN)
        circuit = Circuit()

        assert circuit.set_origin(prefab) is circuit
        assert circuit.context.position == prefab.position

    def test_last_call_wins(self):
        circuit = Circuit()

        circuit.set_origin(Prefab("Anvil").set_position((1, 2, 3)))
        circuit.set_origin(Prefab("Anvil").set_position((4, 5, 6)))

        assert circuit.context.position == Vector3(4, 5, 6)

    def test_after_finalize(self):
        prefab = Prefab("Anvil").set_position(ORIGIN)
        circuit = Circuit()
        circuit.set_origin(prefab)
        circuit.finalize()

        with pytest.raises(CircuitFinalizedError, match="already been converted to a Prefab"):
            circuit.set_origin(prefab)


class TestFinalize:
    """Tests for Circuit.finalize."""

    def test_bakes_relative_positions(self, lever, door):
        circuit = Circuit()
        circuit.create_wire("boolean").connect(lever, door)
        circuit.set_origin(door)

        context = circuit.finalize()

        assert context is circuit.context
        assert context.name == "Logic_Context"
        assert context.position == ORIGIN
        assert [child.parent_hash for child in context.children] == [0, 0]

        baked_lever, baked_door = (child.prefab for child in context.children)
        assert baked_lever.name == "MRK_Small_Lever"
        assert baked_lever.position == Vector3(-69, -420, -1337)
        assert baked_door.name == "MRK_gate_02"
        assert baked_door.position == Vector3(0, 0, 0)

        assert baked_lever.to_dict() == lever.to_dict()
        assert baked_door.to_dict() == door.to_dict()
        assert baked_door.get_component("LogicBoolReceiver").sender == 1

    def test_children_are_clones(self, lever, door):
        circuit = Circuit()
        circuit.create_wire("boolean").connect(lever, door)
        circuit.set_origin(door)

        context = circuit.finalize()
        baked_door = context.children[1].prefab

        assert baked_door is not door
        door.get_component("LogicBoolReceiver").sender = 99
        assert baked_door.get_component("LogicBoolReceiver").sender == 1

    def test_clears_tracked_prefabs(self, lever, door):
        circuit = Circuit()
        circuit.create_wire("boolean").connect(lever, door)
        circuit.set_origin(door)

        circuit.finalize()

        assert circuit.prefabs == []
        assert circuit.is_finalized

    def test_origin_not_set(self):
        circuit = Circuit()

        with pytest.raises(OriginNotSetError) as exc_info:
            circuit.finalize()

        assert str(exc_info.value).startswith("You need to set the Circuit origin first")
        assert not circuit.is_finalized

    def test_origin_not_set_keeps_circuit_open(self, lever, door):
        circuit = Circuit()
        circuit.create_wire("boolean").connect(lever, door)

        with pytest.raises(OriginNotSetError):
            circuit.finalize()

        circuit.set_origin(door)
        context = circuit.finalize()
        assert len(context.children) == 2

    def test_finalize_twice(self):
        circuit = finalized_circuit()

        with pytest.raises(CircuitFinalizedError) as exc_info:
            circuit.finalize()

        assert str(exc_info.value) == (
            "You can only convert a Circuit to a Prefab once. "
            "This Circuit has already been converted."
        )

    def test_existing_wire_after_finalize(self, lever, door):
        circuit = Circuit()
        wire = circuit.create_wire("boolean")
        circuit.set_origin(door)
        circuit.finalize()

        with pytest.raises(CircuitFinalizedError):
            wire.connect(lever, door)

        assert lever.components == {}
