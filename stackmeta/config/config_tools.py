# stackmeta/config/config_tools.py
"""
Default values for tool capability records.
"""

TOOL_DEFAULT_FULL_PUNCH_INTERVAL = 1.4
TOOL_DEFAULT_MAX_DROP_LEVEL = 1
TOOL_DEFAULT_PUNCH_ATTACK_USES = 0

# Per dig-group defaults
TOOL_GROUPCAP_DEFAULT_USES = 20
TOOL_GROUPCAP_DEFAULT_MAXLEVEL = 1
