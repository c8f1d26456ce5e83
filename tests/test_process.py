import io
import os
import signal
import subprocess
import sys

import pytest

from tgshell.process import (
    BuiltinProcess,
    CommandFailedError,
    ExternalProcess,
    ProcessGroup,
    ProcessStatus,
    execute_and_capture_output,
    run_external_command,
)

PY = sys.executable


def _spawn(code, **kwargs):
    params = {"stdin": None, "stdout": subprocess.PIPE, "stderr": None, "pgid": None}
    params.update(kwargs)
    return run_external_command(PY, ["-c", code], **params)


def test_builtin_process_is_completed():
    proc = BuiltinProcess(["echo", "hello"], 0)
    assert proc.id() is None
    assert proc.status() is ProcessStatus.COMPLETED
    assert proc.status_code() == 0
    assert proc.wait() == 0
    assert proc.try_wait() == 0
    assert proc.argv_text() == "echo hello"


def test_builtin_process_take_stdout_once():
    stream = io.BytesIO(b"data")
    proc = BuiltinProcess(["cat"], 1, stdout=stream)
    assert proc.take_stdout() is stream
    assert proc.take_stdout() is None
    assert proc.status_code() == 1


def test_builtin_repr_marks_builtin():
    assert "(builtin)" in repr(BuiltinProcess(["x"], 0))


def test_process_group_defaults():
    group = ProcessGroup()
    assert group.id is None
    assert group.processes == []
    assert group.foreground is True


def test_external_process_output_and_status():
    proc, pgid = _spawn("print('hi')")
    assert isinstance(proc, ExternalProcess)
    assert pgid == proc.id()
    assert proc.status_code() is None
    out = proc.take_stdout()
    assert out.read() == b"hi\n"
    out.close()
    assert proc.wait() == 0
    assert proc.status() is ProcessStatus.COMPLETED
    assert proc.status_code() == 0
    assert proc.take_stdout() is None


def test_external_process_argv_text():
    proc, _ = _spawn("pass")
    proc.wait()
    assert proc.argv_text() == f"{PY} -c pass"


def test_external_process_nonzero_exit():
    proc, _ = _spawn("import sys; sys.exit(3)", stdout=None)
    assert proc.wait() == 3
    assert proc.try_wait() == 3


def test_try_wait_running_then_kill():
    proc, pgid = _spawn("import time; time.sleep(30)", stdout=None)
    assert proc.try_wait() is None
    assert proc.status() is ProcessStatus.RUNNING
    assert os.getpgid(proc.id()) == pgid
    proc.kill()
    assert proc.wait() == -signal.SIGKILL
    assert proc.status() is ProcessStatus.COMPLETED


def test_second_process_joins_existing_group():
    leader, pgid = _spawn("import time; time.sleep(30)", stdout=None)
    member, member_pgid = _spawn("import time; time.sleep(30)", stdout=None, pgid=pgid)
    assert member_pgid == pgid
    assert os.getpgid(member.id()) == pgid
    member.kill()
    leader.kill()
    member.wait()
    leader.wait()


def test_pipeline_between_processes():
    first, pgid = _spawn("print('piped')")
    second, _ = _spawn(
        "import sys; sys.stdout.write(sys.stdin.read().upper())",
        stdin=first.take_stdout(),
        pgid=pgid,
    )
    out = second.take_stdout()
    assert out.read() == b"PIPED\n"
    out.close()
    assert first.wait() == 0
    assert second.wait() == 0


def test_output_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    proc, _ = _spawn("print('fd')", stdout=write_fd)
    os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        assert reader.read() == b"fd\n"
    assert proc.wait() == 0


def test_spawn_missing_program_raises():
    with pytest.raises(FileNotFoundError):
        run_external_command(
            "/nonexistent/program", [], stdin=None, stdout=None, stderr=None, pgid=None
        )


def test_execute_and_capture_output():
    assert execute_and_capture_output(PY, ["-c", "print('captured')"]) == "captured\n"


def test_execute_and_capture_output_failure():
    with pytest.raises(CommandFailedError, match="Command execution failed"):
        execute_and_capture_output(PY, ["-c", "import sys; sys.exit(1)"])


def test_command_failed_error_is_oserror():
    with pytest.raises(OSError):
        execute_and_capture_output(PY, ["-c", "import sys; sys.exit(2)"])