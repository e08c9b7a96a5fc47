"""Tests for the command line entry point."""

import pytest

from lm_sidekick import __main__ as cli


@pytest.fixture(autouse=True)
def quiet_env(monkeypatch, restore_logger):
    monkeypatch.setenv("LOG_DIR", "")


class TestMain:
    def test_clean_exit(self, monkeypatch):
        seen = []

        async def fake_serve(settings):
            seen.append(settings)

        monkeypatch.setattr(cli, "serve", fake_serve)

        assert cli.main(["--log-level", "debug"]) == 0
        assert seen[0].log_level == "debug"

    def test_interrupt_is_graceful(self, monkeypatch):
        async def fake_serve(settings):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "serve", fake_serve)

        assert cli.main([]) == 0

    def test_startup_failure_exits_1(self, monkeypatch):
        async def fake_serve(settings):
            raise OSError("stdio unavailable")

        monkeypatch.setattr(cli, "serve", fake_serve)

        assert cli.main([]) == 1
