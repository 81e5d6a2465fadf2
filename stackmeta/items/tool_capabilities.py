# stackmeta/items/tool_capabilities.py
"""
Tool capability records: how fast a tool digs each node group, how many uses
it lasts, and the damage it deals. Stored on item stacks as a JSON document
under the `tool_capabilities` metadata key.
"""
import json
import math
from typing import Any, Dict, Optional

from stackmeta.config import (
    TOOL_DEFAULT_FULL_PUNCH_INTERVAL, TOOL_DEFAULT_MAX_DROP_LEVEL, TOOL_DEFAULT_PUNCH_ATTACK_USES,
    TOOL_GROUPCAP_DEFAULT_MAXLEVEL, TOOL_GROUPCAP_DEFAULT_USES
)
from stackmeta.errors import ToolCapabilitiesError

def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)

def _reject_constant(name: str) -> Any:
    raise ToolCapabilitiesError(f"Invalid tool capabilities JSON: {name} is not allowed")

def _is_int(value: Any) -> bool:
    # Whole floats such as 3.0 count as ints, matching lenient JSON readers
    if isinstance(value, bool):
        return False
    return isinstance(value, int) or (isinstance(value, float) and value.is_integer())


class ToolGroupCap:
    """Digging capability for a single node group."""

    def __init__(self, times: Optional[Dict[int, float]] = None,
                 uses: int = TOOL_GROUPCAP_DEFAULT_USES,
                 maxlevel: int = TOOL_GROUPCAP_DEFAULT_MAXLEVEL):
        self.times: Dict[int, float] = dict(times) if times else {}
        self.uses = uses
        self.maxlevel = maxlevel

    def get_time(self, rating: int) -> Optional[float]:
        """Dig time in seconds for a node with the given group rating, or None if it can't be dug."""
        return self.times.get(rating)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"maxlevel": self.maxlevel}
        # uses=1 is left out and reads back as the default (20); existing saved
        # tool capabilities depend on this layout.
        if self.uses != 1:
            data["uses"] = self.uses
        # Times are written as a list indexed by rating; missing ratings become null.
        times_list: list = []
        if self.times:
            times_list = [None] * (max(self.times) + 1)
            for rating, seconds in self.times.items():
                times_list[rating] = seconds
        data["times"] = times_list
        return data

    @classmethod
    def from_dict(cls, data: Any) -> 'ToolGroupCap':
        groupcap = cls()
        if not isinstance(data, dict):
            return groupcap

        if _is_int(data.get("maxlevel")):
            groupcap.maxlevel = int(data["maxlevel"])
        if _is_int(data.get("uses")):
            groupcap.uses = int(data["uses"])

        times = data.get("times")
        if isinstance(times, list):
            for rating, seconds in enumerate(times):
                if _is_number(seconds):
                    groupcap.times[rating] = float(seconds)
        return groupcap

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToolGroupCap):
            return NotImplemented
        return (self.times == other.times and self.uses == other.uses
                and self.maxlevel == other.maxlevel)

    def __repr__(self) -> str:
        return f"ToolGroupCap(times={self.times}, uses={self.uses}, maxlevel={self.maxlevel})"


class ToolCapabilities:
    """Complete capability set of a tool. Default-constructed values describe a bare hand."""

    def __init__(self, full_punch_interval: float = TOOL_DEFAULT_FULL_PUNCH_INTERVAL,
                 max_drop_level: int = TOOL_DEFAULT_MAX_DROP_LEVEL,
                 groupcaps: Optional[Dict[str, ToolGroupCap]] = None,
                 damage_groups: Optional[Dict[str, int]] = None,
                 punch_attack_uses: int = TOOL_DEFAULT_PUNCH_ATTACK_USES):
        self.full_punch_interval = full_punch_interval
        self.max_drop_level = max_drop_level
        self.groupcaps: Dict[str, ToolGroupCap] = dict(groupcaps) if groupcaps else {}
        self.damage_groups: Dict[str, int] = dict(damage_groups) if damage_groups else {}
        self.punch_attack_uses = punch_attack_uses

    def to_dict(self) -> Dict[str, Any]:
        return {
            "full_punch_interval": self.full_punch_interval,
            "max_drop_level": self.max_drop_level,
            "punch_attack_uses": self.punch_attack_uses,
            "groupcaps": {name: cap.to_dict() for name, cap in self.groupcaps.items()},
            "damage_groups": dict(self.damage_groups)
        }

    def to_json(self) -> str:
        """Raises ToolCapabilitiesError if a field is NaN or infinite, which JSON cannot hold."""
        try:
            return json.dumps(self.to_dict(), separators=(",", ":"), allow_nan=False)
        except ValueError as e:
            raise ToolCapabilitiesError(f"Tool capabilities not representable as JSON: {e}") from e

    def update_from_dict(self, data: Any) -> None:
        """
        Overlays fields found in `data` onto this record.
        Fields of the wrong type are skipped rather than rejected.
        """
        if not isinstance(data, dict):
            return

        if _is_number(data.get("full_punch_interval")):
            self.full_punch_interval = float(data["full_punch_interval"])
        if _is_int(data.get("max_drop_level")):
            self.max_drop_level = int(data["max_drop_level"])
        if _is_int(data.get("punch_attack_uses")):
            self.punch_attack_uses = int(data["punch_attack_uses"])

        groupcaps = data.get("groupcaps")
        if isinstance(groupcaps, dict):
            for name, cap_data in groupcaps.items():
                self.groupcaps[name] = ToolGroupCap.from_dict(cap_data)

        damage_groups = data.get("damage_groups")
        if isinstance(damage_groups, dict):
            for name, amount in damage_groups.items():
                if _is_int(amount):
                    self.damage_groups[name] = int(amount)

    def deserialize_json(self, text: str) -> None:
        """Parses `text` and overlays it onto this record. Raises ToolCapabilitiesError on malformed JSON."""
        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise ToolCapabilitiesError(f"Invalid tool capabilities JSON: {e}") from e
        self.update_from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ToolCapabilities':
        caps = cls()
        caps.update_from_dict(data)
        return caps

    @classmethod
    def from_json(cls, text: str) -> 'ToolCapabilities':
        caps = cls()
        caps.deserialize_json(text)
        return caps

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToolCapabilities):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"ToolCapabilities(full_punch_interval={self.full_punch_interval}, "
                f"max_drop_level={self.max_drop_level}, groupcaps={self.groupcaps}, "
                f"damage_groups={self.damage_groups}, punch_attack_uses={self.punch_attack_uses})")
