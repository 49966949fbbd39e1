import os

PROMPT = "ccsh>"

# Resolved once at import so a later `cd` does not move the history file
HISTORY_FILE = os.path.abspath(os.getenv("CCSH_HISTORY_FILE", "history.txt"))

# Seconds to wait for started stages to exit after a failed start
TERMINATE_TIMEOUT = 3

NO_COMMANDS_MSG = "No commands found."
UNKNOWN_COMMAND_MSG = "Unknown command"
