# stackmeta/items/metadata/sanitizer.py
from stackmeta.config import META_CONTROL_CHARS

_STRIP_TABLE = {ord(char): None for char in META_CONTROL_CHARS}

def sanitize_string(text: str) -> str:
    """Removes the wire grammar's control characters from `text`."""
    return text.translate(_STRIP_TABLE)
