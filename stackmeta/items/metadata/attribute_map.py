# stackmeta/items/metadata/attribute_map.py
from typing import Dict, Iterator, List, Optional, Tuple

from stackmeta.config import META_RESOLVE_MAX_DEPTH

class AttributeMap:
    """
    Ordered string-to-string store backing item metadata.
    Knows nothing about the wire format or reserved keys.
    """

    def __init__(self):
        self._vars: Dict[str, str] = {}
        self.modified = False

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._vars.get(name, default)

    def set(self, name: str, value: str) -> bool:
        """Stores `value` under `name`. Returns False if it was already stored."""
        if name in self._vars and self._vars[name] == value:
            return False
        self._vars[name] = value
        self.modified = True
        return True

    def contains(self, name: str) -> bool:
        return name in self._vars

    def clear(self) -> None:
        if self._vars:
            self.modified = True
        self._vars.clear()

    def items(self) -> List[Tuple[str, str]]:
        return list(self._vars.items())

    def keys(self) -> List[str]:
        return list(self._vars.keys())

    def empty(self) -> bool:
        return not self._vars

    def resolve(self, value: str, depth: int = META_RESOLVE_MAX_DEPTH) -> str:
        """Expands a whole-value reference '${name}' to the value stored under name, following up to `depth` references."""
        if depth > 0 and len(value) >= 3 and value.startswith("${") and value.endswith("}"):
            target = self._vars.get(value[2:-1], "")
            return self.resolve(target, depth - 1)
        return value

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._vars.items()))

    def __len__(self) -> int:
        return len(self._vars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeMap):
            return NotImplemented
        return self._vars == other._vars

    def __repr__(self) -> str:
        return f"AttributeMap({self._vars!r})"
