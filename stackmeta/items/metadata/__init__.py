"""
Item Stack Metadata Package.
Sanitized string attributes, their wire format, and the cached tool capabilities.
"""
from .attribute_map import AttributeMap
from .sanitizer import sanitize_string
from .core import ItemStackMetadata
