"""Tests for CLI module."""

import json
import os
import pytest
from unittest.mock import patch

from journeystats.presentation.cli.cli import async_main, load_events

MISSING_CONFIG = "/nonexistent/journeystats.json"


@pytest.fixture(autouse=True)
def clean_env():
    env = {k: v for k, v in os.environ.items() if not k.startswith("JOURNEYSTATS_")}
    with patch.dict(os.environ, env, clear=True):
        yield


def write_events(tmp_path, entries):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(entries))
    return str(path)


class TestCLIHelp:
    @pytest.mark.asyncio
    async def test_no_command_prints_help(self, capsys):
        with patch("sys.argv", ["journeystats", "-c", MISSING_CONFIG]):
            await async_main()
        captured = capsys.readouterr()
        assert "deployment analytics" in captured.out

    @pytest.mark.asyncio
    async def test_help_flag(self):
        with patch("sys.argv", ["journeystats", "--help"]), \
             pytest.raises(SystemExit, match="0"):
            await async_main()

    @pytest.mark.asyncio
    async def test_replay_help(self):
        with patch("sys.argv", ["journeystats", "replay", "--help"]), \
             pytest.raises(SystemExit, match="0"):
            await async_main()

    @pytest.mark.asyncio
    async def test_profile_help(self):
        with patch("sys.argv", ["journeystats", "profile", "--help"]), \
             pytest.raises(SystemExit, match="0"):
            await async_main()


class TestLoadEvents:
    def test_load_events(self, tmp_path):
        path = write_events(tmp_path, [
            {"name": "deployment.done", "payload": {"tab": {"type": "bpmn"}}},
            {"name": "deployment.error", "payload": {"tab": {"type": "dmn"}, "error": {"code": "E"}}},
        ])

        events = load_events(path)

        assert [name for name, _ in events] == ["deployment.done", "deployment.error"]
        assert events[1][1].error.code == "E"

    def test_rejects_non_list(self, tmp_path):
        path = write_events(tmp_path, {"name": "deployment.done"})
        with pytest.raises(ValueError, match="list"):
            load_events(path)

    def test_rejects_unknown_event(self, tmp_path):
        path = write_events(tmp_path, [{"name": "deployment.started", "payload": {}}])
        with pytest.raises(ValueError, match="unknown event name"):
            load_events(path)

    def test_rejects_missing_tab(self, tmp_path):
        path = write_events(tmp_path, [{"name": "deployment.done", "payload": {}}])
        with pytest.raises(ValueError, match="entry 0"):
            load_events(path)


class TestReplay:
    @pytest.mark.asyncio
    async def test_replay_prints_records(self, tmp_path, capsys):
        path = write_events(tmp_path, [
            {
                "name": "deployment.done",
                "payload": {"tab": {"type": "cloud-bpmn"}, "context": "startInstanceTool"},
            },
            {"name": "deployment.done", "payload": {"tab": {"type": "cmmn"}}},
            {
                "name": "deployment.error",
                "payload": {
                    "tab": {"type": "bpmn"},
                    "error": {"code": "something went wrong"},
                    "context": "deploymentTool",
                },
            },
        ])

        with patch("sys.argv", ["journeystats", "-c", MISSING_CONFIG, "replay", path]):
            await async_main()

        captured = capsys.readouterr()
        lines = [json.loads(line) for line in captured.out.splitlines()]
        assert lines == [
            {
                "event": "startInstance:success",
                "record": {"diagramType": "bpmn", "executionPlatform": "Camunda Cloud"},
            },
            {
                "event": "deploy:error",
                "record": {"diagramType": "bpmn", "error": "something went wrong"},
            },
        ]
        assert "Replayed 3 events, tracked 2 records" in captured.err

    @pytest.mark.asyncio
    async def test_replay_flush_without_analytics(self, tmp_path, capsys):
        path = write_events(tmp_path, [])

        with patch(
            "sys.argv", ["journeystats", "-c", MISSING_CONFIG, "replay", path, "--flush"]
        ):
            await async_main()

        assert "Analytics disabled" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_replay_missing_file(self, tmp_path, capsys):
        missing = str(tmp_path / "missing.json")
        with patch("sys.argv", ["journeystats", "-c", MISSING_CONFIG, "replay", missing]), \
             pytest.raises(SystemExit, match="1"):
            await async_main()

        assert "Events file not found" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_replay_invalid_file(self, tmp_path, capsys):
        path = tmp_path / "events.json"
        path.write_text("{{{")
        with patch(
            "sys.argv", ["journeystats", "-c", MISSING_CONFIG, "replay", str(path)]
        ), pytest.raises(SystemExit, match="1"):
            await async_main()

        assert "Invalid events file" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_replay_insecure_telemetry_endpoint(self, tmp_path, capsys):
        path = write_events(tmp_path, [])
        env = {"JOURNEYSTATS_TELEMETRY_ENDPOINT": "http://collector.example.com:4317"}
        with patch.dict(os.environ, env), \
             patch("sys.argv", ["journeystats", "-c", MISSING_CONFIG, "replay", path]), \
             pytest.raises(SystemExit, match="1"):
            await async_main()

        out = capsys.readouterr().out
        assert "Invalid configuration" in out
        assert "Invalid events file" not in out

    @pytest.mark.asyncio
    async def test_invalid_config_value(self, tmp_path, capsys):
        path = write_events(tmp_path, [])
        with patch.dict(os.environ, {"JOURNEYSTATS_ANALYTICS_TIMEOUT": "soon"}), \
             patch("sys.argv", ["journeystats", "-c", MISSING_CONFIG, "replay", path]), \
             pytest.raises(SystemExit, match="1"):
            await async_main()

        assert "Invalid configuration" in capsys.readouterr().out


class TestProfile:
    @pytest.mark.asyncio
    async def test_profile_embedded(self, fixtures_dir, capsys):
        diagram = str(fixtures_dir / "engine-profile.bpmn")
        with patch("sys.argv", ["journeystats", "-c", MISSING_CONFIG, "profile", diagram]):
            await async_main()

        assert json.loads(capsys.readouterr().out) == {
            "executionPlatform": "Camunda Platform",
            "executionPlatformVersion": "7.15.0",
        }

    @pytest.mark.asyncio
    async def test_profile_cloud_default(self, fixtures_dir, capsys):
        diagram = str(fixtures_dir / "empty.dmn")
        with patch(
            "sys.argv",
            ["journeystats", "-c", MISSING_CONFIG, "profile", diagram, "-t", "cloud-dmn"],
        ):
            await async_main()

        assert json.loads(capsys.readouterr().out) == {"executionPlatform": "Camunda Cloud"}

    @pytest.mark.asyncio
    async def test_profile_missing_file(self, tmp_path, capsys):
        missing = str(tmp_path / "missing.bpmn")
        with patch("sys.argv", ["journeystats", "-c", MISSING_CONFIG, "profile", missing]), \
             pytest.raises(SystemExit, match="1"):
            await async_main()
