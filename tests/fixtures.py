# tests/fixtures.py
import unittest
import sys
import os

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'stackmeta' without installing it
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from stackmeta.config import META_KV_DELIM, META_PAIR_DELIM, META_START
from stackmeta.items.metadata import ItemStackMetadata
from stackmeta.items.tool_capabilities import ToolCapabilities, ToolGroupCap
from stackmeta.utils.logger import Logger, LogLevel

def raw_payload(*pairs) -> str:
    """Builds an unwrapped START-prefixed payload from (name, value) pairs."""
    return META_START + "".join(f"{name}{META_KV_DELIM}{value}{META_PAIR_DELIM}" for name, value in pairs)

def make_pickaxe_caps() -> ToolCapabilities:
    return ToolCapabilities(
        full_punch_interval=0.9,
        max_drop_level=3,
        groupcaps={"cracky": ToolGroupCap(times={1: 2.0, 2: 1.0, 3: 0.5}, uses=30, maxlevel=3)},
        damage_groups={"fleshy": 5}
    )

class MetadataTestBase(unittest.TestCase):
    """Base class for all metadata tests."""

    def setUp(self):
        """Runs before EVERY test function."""
        # Keep test output clean; messages are still recorded in Logger.history()
        self._old_log_level = Logger.get_level()
        Logger.set_level(LogLevel.CRITICAL + 1)
        Logger.clear_history()

        self.meta = ItemStackMetadata()

    def tearDown(self):
        Logger.set_level(self._old_log_level)
        Logger.clear_history()

    def roundtrip(self, meta: ItemStackMetadata, sparse: bool = False) -> ItemStackMetadata:
        loaded = ItemStackMetadata()
        loaded.deserialize(meta.serialize(sparse))
        return loaded
