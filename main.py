import sys

from seqshell import config
from seqshell.builtin import default_registry
from seqshell.errors import AllocationError
from seqshell.executor import Dispatcher, resolve_wait_mode
from seqshell.job_control import cleanup_children
from seqshell.shell import Session, read_script

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def main(argv=None):
    """Usage: seqshell [script-path]; extra arguments are ignored"""
    argv = sys.argv if argv is None else argv
    script = argv[1] if len(argv) > 1 else None

    session = Session(
        Dispatcher(default_registry()),
        wait_mode=resolve_wait_mode(config.WAIT_MODE),
    )

    try:
        buffer = None
        if script is not None:
            try:
                buffer = read_script(script)
            except OSError as e:
                print(f"{config.SHELL_NAME}: {script}: {e.strerror or e}", file=sys.stderr)
                return EXIT_FAILURE
        session.run(buffer)
    except AllocationError as e:
        print(f"{config.SHELL_NAME}: {e}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        cleanup_children()

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
