# Area: Bridge
"""Fixed reply texts sent back to callers."""

MOVE_SUCCESS = "move success"
MOVE_FAILURE = "move failure"
UNSUPPORTED_COMMAND = "unsupported command"
COMMAND_FAILURE = "command failure"
LEGAL_HEADER = "legal"

SESSION_STARTED = "started"
SESSION_NOT_STARTED = "not started"
RESTARTED = "hopefully restarted"
STATUS_TEXT_ADDED = "added"
TEMPORARY_MESSAGE_SET = "message set"
