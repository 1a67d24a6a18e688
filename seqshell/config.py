import os

SHELL_NAME = "seqshell"

# Prompt
PROMPT = "seqshell> "
PROMPT_COLOR = "\x1b[32m"
RESET_COLOR = "\x1b[0m"
USE_COLOR = "NO_COLOR" not in os.environ

# History
HISTORY_FILE = os.path.expanduser(os.getenv("SEQSHELL_HISTFILE", "~/.seqshell_history"))
MAX_HISTORY = 1000

# "sequential": wait for each child before the next statement
# "batch": start every child of a line, then wait for all of them
WAIT_MODE = os.getenv("SEQSHELL_WAIT_MODE", "sequential")

# Seconds to wait for leftover children after SIGTERM on shutdown
CLEANUP_TIMEOUT = 3
