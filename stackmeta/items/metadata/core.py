# stackmeta/items/metadata/core.py
from typing import List, Optional, Tuple

from stackmeta.config import TOOLCAP_KEY
from stackmeta.errors import ToolCapabilitiesError
from stackmeta.items.tool_capabilities import ToolCapabilities
from stackmeta.utils.logger import Logger
from .attribute_map import AttributeMap
from .persistence import MetadataPersistenceMixin
from .sanitizer import sanitize_string

class ItemStackMetadata(MetadataPersistenceMixin):
    """
    String attributes attached to one item stack.
    All writes go through set_string, which strips grammar control characters
    and keeps the cached tool capabilities in step with the `tool_capabilities` attribute.
    Persistence is handled by the mixin.
    """

    def __init__(self):
        self.attributes = AttributeMap()
        self.toolcaps_overridden = False
        self.toolcaps_override = ToolCapabilities()
        self.tool_capabilities_error: Optional[str] = None

    # --- Queries ---

    def get_string(self, name: str, default: str = "") -> str:
        """Value stored under `name`, with '${other}' references expanded up to two levels deep."""
        value = self.attributes.get(name)
        if value is None:
            return default
        return self.attributes.resolve(value)

    def get_raw(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def contains(self, name: str) -> bool:
        return self.attributes.contains(name)

    def items(self) -> List[Tuple[str, str]]:
        return self.attributes.items()

    def __contains__(self, name: object) -> bool:
        return name in self.attributes

    def __len__(self) -> int:
        return len(self.attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemStackMetadata):
            return NotImplemented
        return self.attributes == other.attributes

    # --- Mutation ---

    def set_string(self, name: str, value: str) -> bool:
        """Sanitizes and stores an attribute. Returns True if the stored value changed."""
        clean_name = sanitize_string(name)
        clean_value = sanitize_string(value)

        changed = self.attributes.set(clean_name, clean_value)
        if clean_name == TOOLCAP_KEY:
            self.update_tool_capabilities()
        return changed

    def clear(self) -> None:
        self.attributes.clear()
        self.update_tool_capabilities()

    # --- Tool Capabilities ---

    def update_tool_capabilities(self) -> Tuple[bool, str]:
        """
        Rebuilds the cached tool capabilities from the `tool_capabilities` attribute.
        Returns (False, reason) if the attribute holds malformed JSON; the cache
        then stays overridden with default values.
        """
        self.tool_capabilities_error = None
        self.toolcaps_override = ToolCapabilities()

        if not self.attributes.contains(TOOLCAP_KEY):
            self.toolcaps_overridden = False
            return True, ""

        self.toolcaps_overridden = True
        raw = self.attributes.get(TOOLCAP_KEY, "")
        if not raw:
            # Set by clear_tool_capabilities: overridden with defaults
            return True, ""

        try:
            self.toolcaps_override.deserialize_json(raw)
        except ToolCapabilitiesError as e:
            self.toolcaps_override = ToolCapabilities()
            self.tool_capabilities_error = str(e)
            Logger.error("ItemStackMetadata", f"Ignoring malformed '{TOOLCAP_KEY}': {e}")
            return False, str(e)
        return True, ""

    def set_tool_capabilities(self, caps: ToolCapabilities) -> Tuple[bool, str]:
        """
        Stores `caps` as JSON. Returns the result of the cache rebuild, or
        (False, reason) without storing anything if `caps` cannot be encoded.
        """
        try:
            encoded = caps.to_json()
        except ToolCapabilitiesError as e:
            Logger.error("ItemStackMetadata", f"Not storing '{TOOLCAP_KEY}': {e}")
            return False, str(e)
        self.set_string(TOOLCAP_KEY, encoded)
        return self._tool_capabilities_result()

    def clear_tool_capabilities(self) -> Tuple[bool, str]:
        self.set_string(TOOLCAP_KEY, "")
        return self._tool_capabilities_result()

    def _tool_capabilities_result(self) -> Tuple[bool, str]:
        if self.tool_capabilities_error:
            return False, self.tool_capabilities_error
        return True, ""

    @property
    def tool_capabilities_override(self) -> Tuple[bool, ToolCapabilities]:
        """(overridden, cached capabilities)."""
        return self.toolcaps_overridden, self.toolcaps_override

    def get_tool_capabilities(self, default: ToolCapabilities) -> ToolCapabilities:
        """The stack's own capabilities if overridden, else `default` (usually the item definition's)."""
        return self.toolcaps_override if self.toolcaps_overridden else default

    def __repr__(self) -> str:
        return f"ItemStackMetadata({self.attributes.items()!r})"
