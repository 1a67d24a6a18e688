import enum
import getpass
import os
import pwd
from collections import namedtuple
from types import MappingProxyType

from seqshell.errors import DirectoryError


class LoopStatus(enum.Enum):
    CONTINUE = "continue"
    TERMINATE = "terminate"


Builtin = namedtuple("Builtin", ["name", "handler", "summary"])


HELP_BANNER = """SeqShell help:
 Type a program name and its arguments, then hit enter.
 Several commands on one line are separated with ;
 Built-in commands:"""


def home_directory():
    """Home directory of the user running the shell"""
    try:
        user = getpass.getuser()
    except (KeyError, OSError) as e:
        raise DirectoryError(None, "getting username fails") from e
    try:
        return pwd.getpwnam(user).pw_dir
    except KeyError as e:
        raise DirectoryError(None, f"no home directory for user '{user}'") from e


def change_directory(path):
    """chdir or raise DirectoryError; cwd is untouched on failure"""
    try:
        os.chdir(path)
    except OSError as e:
        raise DirectoryError(path, e.strerror or str(e)) from e
    except ValueError as e:
        # embedded null byte
        raise DirectoryError(path, str(e)) from e


def builtin_cd(args, registry):
    """Change directory"""
    if len(args) > 1:
        change_directory(args[1])
    else:
        change_directory(home_directory())
    return LoopStatus.CONTINUE


def builtin_help(args, registry):
    """Print help message"""
    print(HELP_BANNER)
    for name in registry.names():
        print(f"  {name:<8}: {registry.summary(name)}")
    return LoopStatus.CONTINUE


def builtin_exit(args, registry):
    """Exit shell"""
    return LoopStatus.TERMINATE


BUILTINS = (
    Builtin("cd", builtin_cd, "change directory (home when no dir is given)"),
    Builtin("help", builtin_help, "print this help"),
    Builtin("exit", builtin_exit, "exit shell"),
    Builtin("quit", builtin_exit, "exit shell"),
)


class BuiltinRegistry:
    """
    Read-only table of builtin commands, kept in registration order.
    If a name is registered twice the first entry wins.
    """

    def __init__(self, builtins):
        table = {}
        for entry in builtins:
            table.setdefault(entry.name, entry)
        self._table = MappingProxyType(table)

    def lookup(self, name):
        """Returns: handler or None"""
        entry = self._table.get(name)
        return entry.handler if entry else None

    def names(self):
        return tuple(self._table)

    def summary(self, name):
        return self._table[name].summary

    def __contains__(self, name):
        return name in self._table

    def __len__(self):
        return len(self._table)


def default_registry():
    return BuiltinRegistry(BUILTINS)
