import signal
import psutil


def init_signal_handlers():
    """Ctrl+C must not kill the shell itself"""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


def restore_default_signals():
    """
    Run in the child between fork and exec.
    SIG_IGN survives exec, so put SIGINT back for pipeline stages.
    """
    signal.signal(signal.SIGINT, signal.SIG_DFL)


def _collect_targets(procs):
    targets = []
    for p in procs:
        try:
            parent = psutil.Process(p.pid)
            targets.extend(parent.children(recursive=True))
            targets.append(parent)
        except psutil.NoSuchProcess:
            continue
    return targets


def terminate_processes(procs, timeout):
    """
    Stop already-started pipeline stages (and anything they spawned),
    then reap every Popen so no zombie is left behind.
    """
    targets = _collect_targets(procs)

    for proc in targets:
        try:
            proc.terminate()
        except psutil.NoSuchProcess:
            pass

    _, alive = psutil.wait_procs(targets, timeout=timeout)
    for proc in alive:
        try:
            proc.kill()
        except psutil.NoSuchProcess:
            pass

    for p in procs:
        p.wait()
