"""
Circuit - A connected set of logic senders and receivers.

The circuit owns everything a wiring session needs:
- The Logic_Context container prefab it eventually returns
- The prefabs touched by any of its wires (insertion-ordered, by identity)
- The identifier counter for new logic senders (starts at 1)
- A one-way finalized flag

Usage:
    circuit = Circuit()
    circuit.create_wire("boolean").connect(lever, door)
    circuit.set_origin(door)

    context = circuit.finalize()
"""

import logging
from typing import Callable, Dict, List, Optional, Union

from ..core.catalog import DEFAULT_CATALOG_PATH, PrefabCatalog, get_catalog
from ..core.config import CircuitConfig, get_config
from ..core.constants import WireType
from ..core.exceptions import (
    CircuitFinalizedError,
    OriginNotSetError,
    WiringIssue,
    log_wiring_issue,
)
from ..core.prefab import PositionLike, Prefab
from .wire import Wire

logger = logging.getLogger(__name__)

IssueSink = Callable[[WiringIssue], None]


class Circuit:
    """
    Represents a connected circuit of logic senders and receivers.

    A circuit can be finalized exactly once; afterwards it accepts no more
    wires, identifiers or origin changes.
    """

    def __init__(
        self,
        position: Optional[PositionLike] = None,
        config: Optional[CircuitConfig] = None,
        catalog: Optional[PrefabCatalog] = None,
        on_issue: Optional[IssueSink] = None,
    ):
        """
        Args:
            position: Initial position of the Logic_Context (the origin)
            config: Circuit configuration. If None, uses the global config.
            catalog: Savability catalog. If None, loaded from config.catalog_path.
            on_issue: Sink for wiring conflicts. If None, issues are logged.
        """
        self.config = config or get_config()

        if catalog is None:
            if self.config.catalog_path == DEFAULT_CATALOG_PATH:
                catalog = get_catalog()
            else:
                catalog = PrefabCatalog.from_yaml(self.config.catalog_path)
        self.catalog = catalog

        self.context = Prefab(self.config.context_prefab_name)
        if position is not None:
            self.context.set_position(position)

        self._on_issue: IssueSink = on_issue or log_wiring_issue
        self._issues: List[WiringIssue] = []
        self._prefabs: Dict[Prefab, None] = {}
        self._next_identifier = 1
        self._is_finalized = False

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def prefabs(self) -> List[Prefab]:
        """Prefabs touched by this circuit's wires, in first-seen order."""
        return list(self._prefabs)

    @property
    def issues(self) -> List[WiringIssue]:
        return list(self._issues)

    @property
    def is_finalized(self) -> bool:
        return self._is_finalized

    # ------------------------------------------------------------------
    # Session operations
    # ------------------------------------------------------------------

    def create_wire(self, wire_type: Union[WireType, str]) -> Wire:
        """
        Creates a wire of a given type that sends signals of that type
        between prefabs of this circuit.
        """
        self._ensure_open("create_wire")
        return Wire(wire_type, self)

    def issue_identifier(self) -> int:
        """Returns a unique numerical identifier for a new logic sender."""
        self._ensure_open("issue_identifier")
        identifier = self._next_identifier
        self._next_identifier += 1
        logger.debug(f"Issued logic identifier {identifier}")
        return identifier

    def set_origin(self, prefab: Prefab) -> "Circuit":
        """Moves the Logic_Context to the position of `prefab`. Last call wins."""
        self._ensure_open("set_origin")
        self.context.set_position(prefab.get_position())
        return self

    def track(self, prefab: Prefab) -> None:
        """Adds `prefab` to the set of prefabs baked by finalize()."""
        self._ensure_open("track")
        self._prefabs.setdefault(prefab, None)

    def report(self, issue: WiringIssue) -> None:
        """Records a wiring conflict and hands it to the issue sink."""
        self._issues.append(issue)
        self._on_issue(issue)

    def finalize(self) -> Prefab:
        """
        Permanently applies this circuit to its Logic_Context and returns it.

        Every tracked prefab is moved relative to the origin and attached to
        the context as a direct child (a clone, so later changes to the
        caller's prefab do not leak into the baked circuit).

        Raises:
            CircuitFinalizedError: Circuit was already finalized
            OriginNotSetError: Origin is still (0, 0, 0)
        """
        if self._is_finalized:
            raise CircuitFinalizedError(
                "finalize",
                "You can only convert a Circuit to a Prefab once. "
                "This Circuit has already been converted.",
            )

        origin = self.context.get_position()
        if origin.is_zero():
            raise OriginNotSetError()

        for prefab in self._prefabs:
            prefab.set_position(prefab.get_position() - origin)
            self.context.add_child_prefab(None, prefab.clone())

        logger.info(
            f"Finalized circuit with {len(self._prefabs)} prefabs at origin "
            f"({origin.x}, {origin.y}, {origin.z}), {self._next_identifier - 1} senders"
        )

        self._prefabs.clear()
        self._is_finalized = True

        return self.context

    def _ensure_open(self, operation: str):
        if self._is_finalized:
            raise CircuitFinalizedError(operation)

    def __repr__(self) -> str:
        state = "finalized" if self._is_finalized else "open"
        return f"Circuit({state}, prefabs={len(self._prefabs)}, next_identifier={self._next_identifier})"
