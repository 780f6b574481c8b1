"""
Shared pytest fixtures for att-circuits tests.

Provides a circuit whose wiring issues are captured in a list, plus
prefab factories for the catalog entries used across the suite.
"""

from typing import List

import pytest

from att_circuits import Circuit, CircuitConfig, Prefab, set_config
from att_circuits.core.exceptions import WiringIssue


@pytest.fixture(autouse=True)
def default_config():
    """Pin the global config so environment variables cannot leak in."""
    config = CircuitConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def captured_issues() -> List[WiringIssue]:
    return []


@pytest.fixture
def circuit(captured_issues) -> Circuit:
    """Circuit that appends wiring issues to `captured_issues`."""
    return Circuit(on_issue=captured_issues.append)


@pytest.fixture
def lever() -> Prefab:
    return Prefab("MRK_Small_Lever")


@pytest.fixture
def door() -> Prefab:
    return Prefab("MRK_gate_02").set_position((69, 420, 1337))


@pytest.fixture
def anvil() -> Prefab:
    return Prefab("Anvil")
