import pytest

from seqshell import config
from seqshell.builtin import default_registry
from seqshell.executor import Dispatcher


@pytest.fixture(autouse=True)
def in_tmp_dir(tmp_path, monkeypatch):
    """Run every test from a scratch directory; cwd is restored afterwards"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "HISTORY_FILE", str(tmp_path / "history"))
    monkeypatch.setattr(config, "USE_COLOR", False)
    return tmp_path


@pytest.fixture
def dispatcher():
    return Dispatcher(default_registry())


class FakeReader:
    """Stands in for input(): hands out lines, then raises EOFError"""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt_text):
        self.prompts.append(prompt_text)
        if not self.lines:
            raise EOFError
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line


@pytest.fixture
def fake_reader():
    return FakeReader


class TtyStdin:
    def isatty(self):
        return True


@pytest.fixture
def tty_stdin(monkeypatch):
    """Pretend the shell reads from a terminal"""
    monkeypatch.setattr("sys.stdin", TtyStdin())
