# stackmeta/config/config_meta.py
"""
Wire grammar and reserved names for item stack metadata.
"""

# --- Grammar Control Characters ---
# These never appear inside a name or a value; the setter strips them.
META_START = "\x01"
META_KV_DELIM = "\x02"
META_PAIR_DELIM = "\x03"
META_CONTROL_CHARS = (META_START, META_KV_DELIM, META_PAIR_DELIM)

# --- Reserved Attributes ---
TOOLCAP_KEY = "tool_capabilities"

# Always written literally, even in sparse mode
META_ALWAYS_DENSE_KEYS = frozenset({
    TOOLCAP_KEY,
    "description",
    "color",
    "short_description",
    "palette_index",
})

# --- Sparse Hash ---
META_HASH_KEY = "_hash"
META_HASH_SEED = 0xdeadbeef

# Number of chained ${name} references followed by AttributeMap.resolve
META_RESOLVE_MAX_DEPTH = 2
