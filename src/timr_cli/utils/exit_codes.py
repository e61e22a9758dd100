"""
Exit codes for the timr CLI.

Each failure class of the core maps to one semantic exit code so scripts
wrapping ``timr`` can tell a bad argument from a damaged store.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments (malformed clock time or date)
ERROR_INVALID_ARGS = 2

# No task matched the request
ERROR_NOT_FOUND = 5

# The record to update disappeared from the store
ERROR_CONFLICT = 6

# Store could not be read, decoded or written
ERROR_STORE = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_CONFLICT: "ERROR_CONFLICT",
        ERROR_STORE: "ERROR_STORE",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid time or date argument",
        ERROR_NOT_FOUND: "No matching task found",
        ERROR_CONFLICT: "Stored record changed underneath the update",
        ERROR_STORE: "Task store is unreadable or could not be written",
    }
    return descriptions.get(code, "Unknown error")
