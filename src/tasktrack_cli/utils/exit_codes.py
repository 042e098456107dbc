"""
Exit codes for TaskTrack CLI.

Semantic exit codes let scripts tell a bad ordinal from a corrupted data file
without parsing the error text.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or unparseable input
ERROR_INVALID_ARGS = 2

# Task number outside the current list
ERROR_NOT_FOUND = 5

# Task file could not be read back
ERROR_DATA_CORRUPTED = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_DATA_CORRUPTED: "ERROR_DATA_CORRUPTED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or unparseable input",
        ERROR_NOT_FOUND: "No task with that number",
        ERROR_DATA_CORRUPTED: "The task file is corrupted",
    }
    return descriptions.get(code, "Unknown error")
