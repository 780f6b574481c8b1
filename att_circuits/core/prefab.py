"""
Prefab model - In-memory game objects that host logic components.

A Prefab is identified by reference: two prefabs with identical fields
are still different objects, so sets and dicts of prefabs deduplicate
by identity.
"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .components import LogicComponent
from .constants import ComponentKind, parse_component_kind


@dataclass(frozen=True)
class Vector3:
    """A point in world space."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def coerce(cls, value: Union["Vector3", Mapping[str, float], Sequence[float]]) -> "Vector3":
        """Build a Vector3 from a Vector3, an {x, y, z} mapping or an (x, y, z) sequence."""
        if isinstance(value, Vector3):
            return value
        if isinstance(value, Mapping):
            return cls(value.get("x", 0.0), value.get("y", 0.0), value.get("z", 0.0))
        x, y, z = value
        return cls(x, y, z)


PositionLike = Union[Vector3, Mapping[str, float], Sequence[float]]


@dataclass
class PrefabChild:
    """A child prefab attached under a parent. parent_hash 0 = direct child."""
    parent_hash: int
    prefab: "Prefab"


@dataclass(eq=False)
class Prefab:
    """A game object with a position, logic components and child prefabs."""
    name: str
    position: Vector3 = field(default_factory=Vector3)
    components: Dict[ComponentKind, LogicComponent] = field(default_factory=dict)
    children: List[PrefabChild] = field(default_factory=list)

    def __post_init__(self):
        self.position = Vector3.coerce(self.position)
        # Components are always keyed by their own kind, whatever key they came in under
        self.components = {component.kind: component for component in self.components.values()}

    def get_position(self) -> Vector3:
        return self.position

    def set_position(self, position: PositionLike) -> "Prefab":
        self.position = Vector3.coerce(position)
        return self

    def add_component(self, component: LogicComponent) -> "Prefab":
        """Attach `component`, keyed by its kind. Replaces any component of the same kind."""
        self.components[component.kind] = component
        return self

    def get_component(self, kind: Union[ComponentKind, str]) -> Optional[LogicComponent]:
        parsed = parse_component_kind(kind)
        if parsed is None:
            return None
        return self.components.get(parsed)

    def add_child_prefab(self, parent_hash: Optional[int], prefab: "Prefab") -> "Prefab":
        self.children.append(PrefabChild(parent_hash=parent_hash or 0, prefab=prefab))
        return self

    def clone(self) -> "Prefab":
        """Deep copy sharing no components or children with this prefab."""
        return deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "position": self.position.to_dict(),
            "components": {
                kind.value: component.to_dict()
                for kind, component in self.components.items()
            },
            "children": [
                {"parent_hash": child.parent_hash, "prefab": child.prefab.to_dict()}
                for child in self.children
            ],
        }
