"""Read-parse-dispatch loop, in batch (script) or interactive mode."""

import os
import sys

from seqshell import config
from seqshell.builtin import LoopStatus
from seqshell.errors import AllocationError
from seqshell.executor import WaitMode, execute_line
from seqshell.history import init_readline, load_history, save_history
from seqshell.parser import parse_line, split_lines


def prompt():
    """Generate shell prompt: current directory, then the shell prompt"""
    try:
        cwd = os.getcwd()
    except OSError:
        print(f"{config.SHELL_NAME}: getting the current directory fails")
        cwd = "?"

    if config.USE_COLOR and sys.stdin.isatty():
        # \001 and \002 tell readline the color codes take no room
        label = f"\001{config.PROMPT_COLOR}\002{config.PROMPT}\001{config.RESET_COLOR}\002"
    else:
        label = config.PROMPT
    return f"{cwd}: {label}"


def read_script(path):
    """
    Read a whole script file and echo it to stdout.
    Returns: file contents
    """
    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as f:
            buffer = f.read()
    except MemoryError as e:
        raise AllocationError() from e

    # Echo the bytes as read; undecodable ones are kept as surrogates
    data = buffer.encode("utf-8", errors="surrogateescape")
    if data and not data.endswith(b"\n"):
        data += b"\n"
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
    return buffer


class Session:
    def __init__(self, dispatcher, wait_mode=WaitMode.SEQUENTIAL, read_line=None, history_file=None):
        self.dispatcher = dispatcher
        self.wait_mode = wait_mode
        # Readline history only makes sense when reading through input()
        if read_line is None:
            read_line = input
            if history_file is None:
                history_file = config.HISTORY_FILE
        self.read_line = read_line
        self.history_file = history_file

    def run(self, buffer=None):
        if buffer is not None:
            return self.run_batch(buffer)
        return self.run_interactive()

    def run_line(self, line):
        """Tokenize one line and run its statements. Returns: LoopStatus"""
        return execute_line(parse_line(line), self.dispatcher, self.wait_mode)

    def run_batch(self, buffer):
        """Run every line of a script once, then stop"""
        for line in split_lines(buffer):
            if self.run_line(line) is LoopStatus.TERMINATE:
                break
        return LoopStatus.TERMINATE

    def run_interactive(self):
        # No history when input is piped in
        use_history = bool(self.history_file) and sys.stdin.isatty()
        if use_history:
            init_readline()
            load_history(self.history_file)

        try:
            status = LoopStatus.CONTINUE
            while status is LoopStatus.CONTINUE:
                try:
                    line = self.read_line(prompt())
                except EOFError:
                    print()
                    break
                except KeyboardInterrupt:
                    # Ctrl+C at the prompt only starts a new line
                    print()
                    continue
                except MemoryError as e:
                    raise AllocationError() from e

                try:
                    status = self.run_line(line)
                except KeyboardInterrupt:
                    print()
                    sys.stdout.flush()
        finally:
            if use_history:
                save_history(self.history_file)

        return LoopStatus.TERMINATE
