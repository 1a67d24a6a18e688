"""Errors raised while running commands.

Only AllocationError is fatal. Everything under CommandError is reported
on stderr and the session keeps going.
"""


class ShellError(Exception):
    """Base class for shell errors"""


class AllocationError(ShellError):
    """Out of memory while growing an input buffer"""

    def __init__(self, message="allocation error"):
        super().__init__(message)


class CommandError(ShellError):
    """A single command failed; the session continues"""


class DirectoryError(CommandError):
    """cd could not resolve or enter its target"""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        if path is None:
            super().__init__(f"cd: {reason}")
        else:
            super().__init__(f"cd: {path}: {reason}")


class CommandNotFound(CommandError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"{name}: command not found")


class SpawnError(CommandError):
    """The program exists but the child could not be started"""

    def __init__(self, name, reason):
        self.name = name
        self.reason = reason
        super().__init__(f"{name}: {reason}")
