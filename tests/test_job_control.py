import subprocess
import sys
import time

from seqshell.job_control import cleanup_children, session_children, zombie_children


def test_nothing_to_clean_up():
    assert cleanup_children() == []


def test_cleanup_stops_leftover_child(capsys):
    proc = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(30)"])
    assert proc.pid in [child.pid for child in session_children()]

    assert cleanup_children(timeout=5) == [proc.pid]
    proc.poll()

    assert proc.pid not in [child.pid for child in session_children()]
    assert f"Terminated leftover process [{proc.pid}]" in capsys.readouterr().out


def test_exited_child_shows_as_zombie_until_reaped():
    proc = subprocess.Popen([sys.executable, "-c", "pass"])
    try:
        for _ in range(100):
            if zombie_children():
                break
            time.sleep(0.05)
        assert proc.pid in [child.pid for child in zombie_children()]
    finally:
        proc.wait()
    assert zombie_children() == []
