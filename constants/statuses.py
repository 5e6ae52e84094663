"""
Lifecycle statuses of a team membership view.
Stored in UPPERCASE for consistency with the other constants.
"""

UNINITIALIZED = "UNINITIALIZED"
LOADING = "LOADING"
READY = "READY"
ERROR = "ERROR"
CLOSED = "CLOSED"
