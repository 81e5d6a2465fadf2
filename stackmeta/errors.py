# stackmeta/errors.py
"""
Exceptions raised by the metadata codecs.
Both derive from ValueError so callers parsing untrusted input can catch either.
"""

class JsonStringError(ValueError):
    """A quoted JSON string literal could not be decoded."""

class ToolCapabilitiesError(ValueError):
    """A tool_capabilities value is not a valid JSON document."""
