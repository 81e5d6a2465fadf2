"""
stackmeta: key-value metadata for stackable inventory items.
"""
from stackmeta.items.metadata import AttributeMap, ItemStackMetadata, sanitize_string
from stackmeta.items.tool_capabilities import ToolCapabilities, ToolGroupCap
from stackmeta.errors import JsonStringError, ToolCapabilitiesError

__version__ = "0.1.0"
