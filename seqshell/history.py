import os
import readline
import sys

from seqshell import config


def init_readline():
    """Line editing key bindings, like a Linux terminal"""
    if not sys.stdin.isatty():
        return

    try:
        # Up/down browse history
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right jump between words
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        readline.parse_and_bind("set editing-mode emacs")
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def load_history(path=None):
    path = path or config.HISTORY_FILE
    try:
        if os.path.exists(path):
            readline.read_history_file(path)
        readline.set_history_length(config.MAX_HISTORY)
    except OSError as e:
        print(f"Warning: Could not load history: {e}", file=sys.stderr)


def save_history(path=None):
    path = path or config.HISTORY_FILE
    try:
        readline.set_history_length(config.MAX_HISTORY)
        readline.write_history_file(path)
    except OSError as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)
