"""End-to-end shutdown of ``python -m lm_sidekick`` over a held-open stdin."""

import os
import signal
import subprocess
import sys

import pytest

pytestmark = pytest.mark.skipif(
    sys.platform == "win32", reason="POSIX signals are needed"
)

READY = "Listening on stdio"
TIMEOUT = 10


@pytest.fixture
def sidekick(tmp_path):
    env = dict(os.environ)
    env.update(
        LOG_DIR="",
        LOG_LEVEL="info",
        LM_STUDIO_API_URL="http://127.0.0.1:9/v1",
        PYTHONUNBUFFERED="1",
    )
    proc = subprocess.Popen(
        [sys.executable, "-m", "lm_sidekick"],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        cwd=tmp_path,
        env=env,
        text=True,
    )
    lines = []
    for line in proc.stderr:
        lines.append(line)
        if READY in line:
            break
    else:
        proc.kill()
        pytest.fail("server exited before listening:\n" + "".join(lines))
    yield proc
    if proc.poll() is None:
        proc.kill()
        proc.wait()
    for stream in (proc.stdin, proc.stdout, proc.stderr):
        stream.close()


class TestShutdown:
    @pytest.mark.parametrize("sig", [signal.SIGTERM, signal.SIGINT])
    def test_signal_exits_cleanly(self, sidekick, sig):
        sidekick.send_signal(sig)

        assert sidekick.wait(timeout=TIMEOUT) == 0
        log = sidekick.stderr.read()
        assert f"Received {sig.name}, shutting down gracefully" in log
        assert "LM Studio MCP Sidekick stopped" in log

    def test_closed_stdin_exits_cleanly(self, sidekick):
        sidekick.stdin.close()

        assert sidekick.wait(timeout=TIMEOUT) == 0
        assert "LM Studio MCP Sidekick stopped" in sidekick.stderr.read()
