"""Builtin and external processes, and spawning external commands with job control."""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Protocol, Union

logger = logging.getLogger(__name__)

# Where a child reads from: None inherits the shell's stdin, an int is a file
# descriptor, anything else is an open file (such as another process's stdout).
StdinSource = Union[None, int, IO[bytes]]
# Where a child writes to: None inherits, an int is a file descriptor or
# ``subprocess.PIPE`` to create a pipe, anything else is an open file.
OutputTarget = Union[None, int, IO[bytes]]

_JOB_CONTROL_SIGNALS = (
    signal.SIGINT,
    signal.SIGQUIT,
    signal.SIGTSTP,
    signal.SIGTTIN,
    signal.SIGTTOU,
    signal.SIGCHLD,
)

_TERMINAL_FD = 0


class ProcessStatus(Enum):
    """Run state of a process."""

    RUNNING = "running"
    STOPPED = "stopped"
    COMPLETED = "completed"


class CommandFailedError(OSError):
    """A command ran but exited unsuccessfully."""


class Process(Protocol):
    def id(self) -> int | None: ...
    def argv_text(self) -> str: ...
    def status(self) -> ProcessStatus: ...
    def status_code(self) -> int | None: ...
    def take_stdout(self) -> IO[bytes] | None: ...
    def kill(self) -> None: ...
    def wait(self) -> int: ...
    def try_wait(self) -> int | None: ...


@dataclass
class ProcessGroup:
    """Processes that share one process group, such as a pipeline."""

    id: int | None = None
    processes: list[Process] = field(default_factory=list)
    foreground: bool = True


class BuiltinProcess:
    """A command run inside the shell; it is complete as soon as it exists."""

    def __init__(
        self, argv: Sequence[str], status_code: int, stdout: IO[bytes] | None = None
    ) -> None:
        self.argv = list(argv)
        self._status_code = status_code
        self._stdout = stdout

    def id(self) -> int | None:
        return None

    def argv_text(self) -> str:
        return " ".join(self.argv)

    def status(self) -> ProcessStatus:
        return ProcessStatus.COMPLETED

    def status_code(self) -> int | None:
        return self._status_code

    def take_stdout(self) -> IO[bytes] | None:
        """Hand over the output stream; later calls return None."""
        stdout, self._stdout = self._stdout, None
        return stdout

    def kill(self) -> None:
        return None

    def wait(self) -> int:
        return self._status_code

    def try_wait(self) -> int | None:
        return self._status_code

    def __repr__(self) -> str:
        return "Process { id: (builtin) }"


class ExternalProcess:
    """A child process started from the shell."""

    def __init__(self, program: str, args: Sequence[str], child: subprocess.Popen) -> None:
        self.argv = [program, *args]
        self._child = child
        self._status = ProcessStatus.RUNNING
        self._status_code: int | None = None

    def id(self) -> int | None:
        return self._child.pid

    def argv_text(self) -> str:
        return " ".join(self.argv)

    def status(self) -> ProcessStatus:
        return self._status

    def status_code(self) -> int | None:
        return self._status_code

    def take_stdout(self) -> IO[bytes] | None:
        """Hand over the piped output stream; later calls return None."""
        stdout, self._child.stdout = self._child.stdout, None
        return stdout

    def kill(self) -> None:
        self._child.kill()

    def wait(self) -> int:
        """Block until the child exits and return its exit code."""
        code = self._child.wait()
        self._mark_completed(code)
        return code

    def try_wait(self) -> int | None:
        """Exit code if the child has exited, None if it is still running."""
        code = self._child.poll()
        if code is None:
            return None
        self._mark_completed(code)
        return code

    def _mark_completed(self, code: int) -> None:
        self._status = ProcessStatus.COMPLETED
        self._status_code = code

    def __repr__(self) -> str:
        return f"Process {{ id: {self._child.pid} }}"


def _child_setup(pgid: int | None, terminal_fd: int | None) -> Callable[[], None]:
    def setup() -> None:
        target = pgid if pgid is not None else os.getpid()
        os.setpgid(0, target)
        if terminal_fd is not None:
            # Taking the terminal from a background group would stop us otherwise.
            signal.signal(signal.SIGTTOU, signal.SIG_IGN)
            os.tcsetpgrp(terminal_fd, target)
        for sig in _JOB_CONTROL_SIGNALS:
            signal.signal(sig, signal.SIG_DFL)

    return setup


def _terminal_is_tty() -> bool:
    try:
        return os.isatty(_TERMINAL_FD)
    except OSError:
        return False


def run_external_command(
    program: str,
    args: Sequence[str],
    stdin: StdinSource,
    stdout: OutputTarget,
    stderr: OutputTarget,
    pgid: int | None,
) -> tuple[ExternalProcess, int]:
    """Start ``program`` in process group ``pgid`` (a new one when None).

    Returns the process and the process group it was placed in.
    """
    job_control = sys.platform != "win32"
    terminal_fd = os.dup(_TERMINAL_FD) if job_control and _terminal_is_tty() else None

    try:
        child = subprocess.Popen(
            [program, *args],
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
            preexec_fn=_child_setup(pgid, terminal_fd) if job_control else None,
            pass_fds=(terminal_fd,) if terminal_fd is not None else (),
        )
    except (OSError, subprocess.SubprocessError):
        if terminal_fd is not None:
            logger.warning("failed to spawn child, resetting terminal's pgrp")
            os.tcsetpgrp(_TERMINAL_FD, os.getpgrp())
        raise
    finally:
        if terminal_fd is not None:
            os.close(terminal_fd)

    group = pgid if pgid is not None else child.pid
    if job_control:
        try:
            os.setpgid(child.pid, group)
        except OSError as err:
            logger.error("failed to set pgid (%s) for pid (%s): %s", group, child.pid, err)

    return ExternalProcess(program, args, child), group


def execute_and_capture_output(program: str, args: Sequence[str]) -> str:
    """Run a command and return its standard output as text.

    Raises CommandFailedError when the command exits unsuccessfully.
    """
    result = subprocess.run([program, *args], stdout=subprocess.PIPE, stderr=None)
    if result.returncode != 0:
        raise CommandFailedError("Command execution failed")
    return result.stdout.decode("utf-8", errors="replace")