"""
Initializes the config package, making all settings available for direct import.
This allows other modules to use `from stackmeta.config import SETTING_NAME` without
knowing which specific file the setting is in.
"""

from .config_debug import *
from .config_meta import *
from .config_tools import *
