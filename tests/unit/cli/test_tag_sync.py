# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the consul-tags CLI.

Tests cover:
    - Active / standby / unmatched probe output end to end
    - Raw register response on stdout
    - Exit codes for each failure category
    - No registration when the lookup fails
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch
from uuid import uuid4

import pytest
from click.testing import CliRunner, Result

from consul_tags.cli.tag_sync import cli, run_tag_sync
from consul_tags.errors import HealthProbeError
from consul_tags.models import ModelTagSyncConfig
from tests.conftest import AGENT, FakeConsulAgent

BASE_ARGS = ["--command", "/usr/local/bin/check-role", "--result-true", "true"]
FULL_ARGS = [*BASE_ARGS, "--result-false", "false"]


@pytest.fixture
def env(data_dir: Path) -> dict[str, str]:
    return {"CONSUL_DATA_DIR": str(data_dir), "CONSUL_AGENT": AGENT}


@pytest.fixture
def agent(
    catalog_record: dict[str, object],
    make_agent: Callable[..., FakeConsulAgent],
) -> Iterator[FakeConsulAgent]:
    fake = make_agent([catalog_record], register_body="true")
    with patch(
        "consul_tags.handlers.handler_consul_catalog.httpx.Client",
        return_value=fake.client(),
    ):
        yield fake


def _invoke(args: list[str], env: dict[str, str], probe_output: str) -> Result:
    runner = CliRunner()
    with patch("consul_tags.cli.tag_sync.run_probe", return_value=probe_output):
        return runner.invoke(cli, args, env=env)


class TestTagSyncCommand:
    def test_active_tag_registered(
        self, agent: FakeConsulAgent, env: dict[str, str]
    ) -> None:
        result = _invoke(FULL_ARGS, env, "true")

        assert result.exit_code == 0
        assert result.output == "true\n"
        (request,) = agent.puts
        assert json.loads(request.content)["Service"]["Tags"] == [
            "mysql",
            "v8",
            "active",
        ]

    def test_standby_tag_registered(
        self, agent: FakeConsulAgent, env: dict[str, str]
    ) -> None:
        result = _invoke(FULL_ARGS, env, "false")

        assert result.exit_code == 0
        tags = json.loads(agent.puts[0].content)["Service"]["Tags"]
        assert tags == ["mysql", "v8", "standby"]

    def test_unmatched_output_keeps_tags(
        self, agent: FakeConsulAgent, env: dict[str, str]
    ) -> None:
        result = _invoke(FULL_ARGS, env, "maintenance")

        assert result.exit_code == 0
        tags = json.loads(agent.puts[0].content)["Service"]["Tags"]
        assert tags == ["mysql", "v8"]

    def test_lookup_uses_node_id_filter(
        self, agent: FakeConsulAgent, env: dict[str, str]
    ) -> None:
        _invoke(FULL_ARGS, env, "true")

        lookup = agent.requests[0]
        assert lookup.method == "GET"
        assert lookup.url.params["filter"] == 'ID == "abc-123"'

    def test_replace_role_tags(
        self,
        catalog_record: dict[str, object],
        make_agent: Callable[..., FakeConsulAgent],
        env: dict[str, str],
    ) -> None:
        catalog_record["ServiceTags"] = ["standby", "mysql", "standby"]
        fake = make_agent([catalog_record])
        with patch(
            "consul_tags.handlers.handler_consul_catalog.httpx.Client",
            return_value=fake.client(),
        ):
            result = _invoke([*FULL_ARGS, "--replace-role-tags"], env, "true")

        assert result.exit_code == 0
        tags = json.loads(fake.puts[0].content)["Service"]["Tags"]
        assert tags == ["mysql", "active"]

    def test_register_error_body_printed(
        self,
        catalog_record: dict[str, object],
        make_agent: Callable[..., FakeConsulAgent],
        env: dict[str, str],
    ) -> None:
        fake = make_agent(
            [catalog_record], register_body="ACL not found", register_status=403
        )
        with patch(
            "consul_tags.handlers.handler_consul_catalog.httpx.Client",
            return_value=fake.client(),
        ):
            result = _invoke(FULL_ARGS, env, "true")

        assert result.exit_code == 0
        assert "ACL not found" in result.output


class TestTagSyncFailures:
    def test_missing_flag_is_usage_error(self, env: dict[str, str]) -> None:
        result = CliRunner().invoke(cli, BASE_ARGS, env=env)
        assert result.exit_code == 2
        assert "--result-false" in result.output

    @pytest.mark.parametrize("missing", ["CONSUL_DATA_DIR", "CONSUL_AGENT"])
    def test_missing_environment_variable(
        self, env: dict[str, str], missing: str
    ) -> None:
        env[missing] = ""
        result = _invoke(FULL_ARGS, env, "true")

        assert result.exit_code == 2
        assert missing in result.output
        assert "INVALID_CONFIGURATION" in result.output

    def test_missing_node_id_file(
        self, agent: FakeConsulAgent, env: dict[str, str], tmp_path: Path
    ) -> None:
        env["CONSUL_DATA_DIR"] = str(tmp_path / "missing")
        result = _invoke(FULL_ARGS, env, "true")

        assert result.exit_code == 3
        assert agent.requests == []

    def test_probe_failure(self, agent: FakeConsulAgent, env: dict[str, str]) -> None:
        runner = CliRunner()
        with patch(
            "consul_tags.cli.tag_sync.run_probe",
            side_effect=HealthProbeError("Failed to execute health probe"),
        ):
            result = runner.invoke(cli, FULL_ARGS, env=env)

        assert result.exit_code == 4
        assert "PROBE_FAILED" in result.output
        assert agent.requests == []

    def test_empty_lookup_aborts_before_register(
        self,
        make_agent: Callable[..., FakeConsulAgent],
        env: dict[str, str],
    ) -> None:
        fake = make_agent([])
        with patch(
            "consul_tags.handlers.handler_consul_catalog.httpx.Client",
            return_value=fake.client(),
        ):
            result = _invoke(FULL_ARGS, env, "true")

        assert result.exit_code == 5
        assert fake.puts == []
        assert len(fake.requests) == 1

    def test_malformed_agent_is_configuration_error(
        self, agent: FakeConsulAgent, env: dict[str, str]
    ) -> None:
        env["CONSUL_AGENT"] = "127.0.0.1:notaport"
        result = _invoke(FULL_ARGS, env, "true")

        assert result.exit_code == 2
        assert "ERROR [INVALID_CONFIGURATION]: Invalid configuration: agent" in (
            result.output
        )
        assert agent.requests == []

    def test_error_line_format(self, env: dict[str, str]) -> None:
        env["CONSUL_AGENT"] = ""
        result = _invoke(FULL_ARGS, env, "true")

        assert (
            "ERROR [INVALID_CONFIGURATION]: "
            "Missing required environment variable CONSUL_AGENT"
        ) in result.output


class TestRunTagSync:
    def test_returns_register_body(
        self,
        catalog_record: dict[str, object],
        make_agent: Callable[..., FakeConsulAgent],
        data_dir: Path,
    ) -> None:
        fake = make_agent([catalog_record], register_body="true")
        config = ModelTagSyncConfig(
            command="/usr/local/bin/check-role",
            result_true="yes",
            result_false="no",
            data_dir=data_dir,
            agent=AGENT,
        )
        with patch("consul_tags.cli.tag_sync.run_probe", return_value="no"):
            body = run_tag_sync(config, client=fake.client())

        assert body == "true"
        tags = json.loads(fake.puts[0].content)["Service"]["Tags"]
        assert tags[-1] == "standby"

    def test_run_log_lines_carry_correlation_id(
        self,
        catalog_record: dict[str, object],
        make_agent: Callable[..., FakeConsulAgent],
        data_dir: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        fake = make_agent([catalog_record], register_status=500)
        config = ModelTagSyncConfig(
            command="/usr/local/bin/check-role",
            result_true="yes",
            result_false="no",
            data_dir=data_dir,
            agent=AGENT,
        )
        correlation_id = uuid4()
        caplog.set_level(logging.DEBUG, logger="consul_tags")

        with patch("consul_tags.cli.tag_sync.run_probe", return_value="maybe"):
            run_tag_sync(config, client=fake.client(), correlation_id=correlation_id)

        messages = [
            record.getMessage()
            for record in caplog.records
            if record.name.startswith("consul_tags")
        ]
        assert any("matched neither" in message for message in messages)
        assert any("returned HTTP 500" in message for message in messages)
        assert messages
        assert all(str(correlation_id) in message for message in messages)
