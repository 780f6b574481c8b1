"""
Prefab Catalog - Which logic components each prefab type can save.

The catalog is read from a YAML file of the form:

    prefabs:
      MRK_Small_Lever:
        - LogicBoolSender
      Logic_Operator:
        - LogicGateReceiver
        - LogicBoolSender

Usage:
    catalog = PrefabCatalog.from_yaml()   # packaged default
    if catalog.supports(LogicSenderKind.BOOL, "MRK_Small_Lever"):
        ...
"""

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Union

import yaml

from .constants import ComponentKind, parse_component_kind
from .exceptions import CatalogError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "prefab_catalog.yaml"


class PrefabCatalog:
    """
    Savability lookup for logic components.

    Unknown prefab names are treated as hosting no logic components.
    """

    def __init__(self, entries: Dict[str, Iterable[ComponentKind]]):
        self._entries: Dict[str, FrozenSet[ComponentKind]] = {
            name: frozenset(kinds) for name, kinds in entries.items()
        }

    @classmethod
    def from_yaml(cls, path: Optional[Union[str, Path]] = None) -> "PrefabCatalog":
        """
        Load a catalog from YAML.

        Args:
            path: Catalog file. If None, uses the packaged prefab_catalog.yaml.

        Raises:
            CatalogError: File missing, unreadable, or not a prefab mapping
        """
        catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH

        try:
            with open(catalog_path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise CatalogError(f"cannot read {catalog_path}: {e}", path=str(catalog_path)) from e
        except yaml.YAMLError as e:
            raise CatalogError(f"invalid YAML in {catalog_path}: {e}", path=str(catalog_path)) from e

        if not isinstance(data, dict) or not isinstance(data.get("prefabs"), dict):
            raise CatalogError("expected a top-level 'prefabs' mapping", path=str(catalog_path))

        entries: Dict[str, List[ComponentKind]] = {}
        for prefab_name, names in data["prefabs"].items():
            if names is not None and not isinstance(names, list):
                raise CatalogError(
                    f"components of prefab '{prefab_name}' must be a list",
                    path=str(catalog_path),
                )
            kinds = []
            for component_name in names or []:
                kind = parse_component_kind(component_name)
                if kind is None:
                    raise CatalogError(
                        f"unknown logic component '{component_name}' for prefab '{prefab_name}'",
                        path=str(catalog_path),
                    )
                kinds.append(kind)
            entries[str(prefab_name)] = kinds

        logger.debug(f"Loaded prefab catalog with {len(entries)} prefabs from {catalog_path}")
        return cls(entries)

    def supports(self, kind: Union[ComponentKind, str], prefab_name: str) -> bool:
        """True if a prefab named `prefab_name` can save a component of `kind`."""
        parsed = parse_component_kind(kind)
        if parsed is None:
            return False
        return parsed in self._entries.get(prefab_name, frozenset())

    def components_for(self, prefab_name: str) -> FrozenSet[ComponentKind]:
        return self._entries.get(prefab_name, frozenset())

    def __contains__(self, prefab_name: str) -> bool:
        return prefab_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_default_catalog: Optional[PrefabCatalog] = None


def get_catalog() -> PrefabCatalog:
    """Get or load the packaged default catalog."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = PrefabCatalog.from_yaml()
    return _default_catalog

