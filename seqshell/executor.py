import enum
import signal
import subprocess
import sys
from dataclasses import dataclass
from typing import Optional

from seqshell.builtin import LoopStatus
from seqshell.errors import CommandError, CommandNotFound, SpawnError


class WaitMode(enum.Enum):
    SEQUENTIAL = "sequential"
    BATCH = "batch"


def resolve_wait_mode(value):
    """Map a config string to a WaitMode, falling back to sequential"""
    try:
        return WaitMode(value.strip().lower())
    except ValueError:
        print(f"Warning: unknown wait mode '{value}', using sequential", file=sys.stderr)
        return WaitMode.SEQUENTIAL


class ProcessStatus(enum.Enum):
    RUNNING = "running"
    EXITED = "exited"
    SIGNALED = "signaled"


@dataclass(frozen=True)
class ProcessState:
    status: ProcessStatus
    # exit code for EXITED, signal number for SIGNALED
    code: Optional[int] = None

    @classmethod
    def from_returncode(cls, returncode):
        if returncode is None:
            return cls(ProcessStatus.RUNNING)
        if returncode < 0:
            return cls(ProcessStatus.SIGNALED, -returncode)
        return cls(ProcessStatus.EXITED, returncode)

    @property
    def terminal(self):
        return self.status is not ProcessStatus.RUNNING


def signal_name(signum):
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


class ProcessHandle:
    """A spawned child and the command line it was started with"""

    def __init__(self, proc, args):
        self.proc = proc
        self.args = list(args)

    @property
    def pid(self):
        return self.proc.pid

    def state(self):
        return ProcessState.from_returncode(self.proc.poll())

    def wait(self):
        """
        Block until the child exits or is killed by a signal.
        A stopped child is not reported by waitpid here, so waiting goes on.
        Returns: ProcessState
        """
        while True:
            try:
                returncode = self.proc.wait()
            except KeyboardInterrupt:
                # The terminal sent SIGINT to the child as well; let it decide.
                continue
            return ProcessState.from_returncode(returncode)


class ProcessLauncher:
    def launch(self, args):
        """
        Start an external program with the shell's stdio and cwd.
        Returns: ProcessHandle
        """
        program = args[0]
        # Keep our own buffered output ahead of the child's.
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            proc = subprocess.Popen(args)
        except FileNotFoundError as e:
            raise CommandNotFound(program) from e
        except PermissionError as e:
            raise SpawnError(program, e.strerror or "permission denied") from e
        except OSError as e:
            raise SpawnError(program, e.strerror or str(e)) from e
        except ValueError as e:
            raise SpawnError(program, str(e)) from e
        return ProcessHandle(proc, args)

    def wait(self, handle):
        state = handle.wait()
        if state.status is ProcessStatus.SIGNALED:
            print(f"{handle.args[0]}: terminated by {signal_name(state.code)}", file=sys.stderr)
        return state

    def run(self, args):
        """Launch and wait. Returns: ProcessState"""
        return self.wait(self.launch(args))


def report_error(error):
    print(error, file=sys.stderr)


class Dispatcher:
    """Sends one statement to a builtin or to the process launcher"""

    def __init__(self, registry, launcher=None):
        self.registry = registry
        self.launcher = launcher or ProcessLauncher()

    def dispatch(self, args, pending=None):
        """
        Run one statement.
        If pending is a list, external commands are only launched and
        their handles appended to it.
        Returns: LoopStatus
        """
        if not args:
            return LoopStatus.CONTINUE

        handler = self.registry.lookup(args[0])
        try:
            if handler is not None:
                return handler(args, self.registry)

            if pending is None:
                self.launcher.run(args)
            else:
                pending.append(self.launcher.launch(args))
        except CommandError as e:
            report_error(e)
        return LoopStatus.CONTINUE


def execute_line(statements, dispatcher, wait_mode=WaitMode.SEQUENTIAL):
    """
    Run the statements of one line in order.
    Stops at the first TERMINATE; the rest of the line is skipped.
    Every child started here has been reaped when this returns.
    Returns: LoopStatus of the last statement run
    """
    pending = [] if wait_mode is WaitMode.BATCH else None
    status = LoopStatus.CONTINUE

    try:
        for args in statements:
            status = dispatcher.dispatch(args, pending)
            if status is LoopStatus.TERMINATE:
                break
    finally:
        for handle in pending or ():
            dispatcher.launcher.wait(handle)

    return status
