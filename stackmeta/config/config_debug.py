# stackmeta/config/config_debug.py
"""
Debug and logging settings.
"""

# Minimum level printed by the Logger (0=DEBUG, 1=INFO, 2=WARNING, 3=ERROR, 4=CRITICAL)
LOG_LEVEL = 1

# Log every attribute folded into the sparse hash (very noisy for large inventories)
DEBUG_LOG_SPARSE_FOLDING = False
