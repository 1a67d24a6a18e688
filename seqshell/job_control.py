import psutil

from seqshell import config


def session_children():
    """Child processes of this shell that still exist (zombies included)"""
    try:
        return psutil.Process().children()
    except psutil.Error:
        return []


def zombie_children():
    """Children that exited but were never reaped"""
    zombies = []
    for child in session_children():
        try:
            if child.status() == psutil.STATUS_ZOMBIE:
                zombies.append(child)
        except psutil.NoSuchProcess:
            continue
    return zombies


def cleanup_children(timeout=None):
    """
    Terminate and reap children this shell left behind.
    Only our own children are signalled, never the process group.
    Returns: list of pids that had to be stopped
    """
    if timeout is None:
        timeout = config.CLEANUP_TIMEOUT

    children = session_children()
    if not children:
        return []

    for child in children:
        try:
            child.terminate()
        except psutil.NoSuchProcess:
            pass

    _, alive = psutil.wait_procs(children, timeout=timeout)
    for child in alive:
        try:
            child.kill()
        except psutil.NoSuchProcess:
            pass
    psutil.wait_procs(alive, timeout=timeout)

    pids = [child.pid for child in children]
    for pid in pids:
        print(f"Terminated leftover process [{pid}]")
    return pids
