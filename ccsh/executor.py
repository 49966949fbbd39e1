import os
import subprocess
from ccsh.config import TERMINATE_TIMEOUT
from ccsh.errors import CommandStartError, CommandFailedError
from ccsh.process_control import restore_default_signals, terminate_processes


def connect_stages(count, stdin=None, stdout=None):
    """
    Create the pipes linking each stage to the next one.
    The first stage reads `stdin`, the last one writes `stdout`
    (None means inherit from the shell).
    Returns: (links: list of [stdin, stdout] per stage, owned pipe fds)
    """
    links = [[None, None] for _ in range(count)]
    links[0][0] = stdin
    links[-1][1] = stdout
    owned = set()

    for idx in range(count - 1):
        read_fd, write_fd = os.pipe()
        links[idx][1] = write_fd
        links[idx + 1][0] = read_fd
        owned.update((read_fd, write_fd))

    return links, owned


def run_external(command, stdin=None, stdout=None):
    """
    Spawn one pipeline stage.
    Returns: Popen object
    """
    try:
        return subprocess.Popen(
            command.argv,
            stdin=stdin,
            stdout=stdout,
            preexec_fn=restore_default_signals
        )
    except (OSError, ValueError, subprocess.SubprocessError) as e:
        # ValueError: NUL byte in an argument
        raise CommandStartError(command, e) from e


def wait_pipeline(commands, procs):
    """
    Wait for every stage in order, even after one has failed.
    Raises the first failure once all of them are reaped.
    """
    first_error = None
    for command, p in zip(commands, procs):
        returncode = p.wait()
        if returncode != 0 and first_error is None:
            first_error = CommandFailedError(command, returncode)

    if first_error is not None:
        raise first_error


def _close_owned(owned, *fds):
    for fd in fds:
        if fd in owned:
            os.close(fd)
            owned.discard(fd)


def execute_pipeline(commands, stdin=None, stdout=None):
    """
    Execute pipeline of commands: connect all, start all, wait all.
    Raises PipelineError on the first stage that fails to start or exits non-zero.
    """
    if not commands:
        return

    links, owned = connect_stages(len(commands), stdin, stdout)
    procs = []

    try:
        for command, (stage_in, stage_out) in zip(commands, links):
            procs.append(run_external(command, stdin=stage_in, stdout=stage_out))
            # The child has its own copies now
            _close_owned(owned, stage_in, stage_out)
    except CommandStartError:
        terminate_processes(procs, TERMINATE_TIMEOUT)
        raise
    finally:
        _close_owned(owned, *list(owned))

    wait_pipeline(commands, procs)
