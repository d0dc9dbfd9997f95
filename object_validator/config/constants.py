"""
Constants used across the validator.
"""

# =============================================================================
# Paths
# =============================================================================
PATH_SEPARATOR: str = "."

# =============================================================================
# Default error payload
# =============================================================================
MESSAGE_KEY: str = "message"
DEFAULT_MESSAGE_PREFIX: str = "Object must contain a valid value for "
