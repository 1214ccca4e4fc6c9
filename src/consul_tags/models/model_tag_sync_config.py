# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tag Sync Run Configuration Model.

Combines the CLI arguments with the two required environment variables
into one validated, immutable configuration object.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from consul_tags.errors import ProtocolConfigurationError

ENV_CONSUL_DATA_DIR = "CONSUL_DATA_DIR"
ENV_CONSUL_AGENT = "CONSUL_AGENT"

DEFAULT_SERVICE_NAME = "mysql-orchestrator"


class ModelTagSyncConfig(BaseModel):
    """Configuration for a single tag sync run.

    Attributes:
        command: Health probe command line, split on whitespace.
        result_true: Probe output that classifies the node as active.
        result_false: Probe output that classifies the node as standby.
        data_dir: Consul data directory holding the ``node-id`` file.
        agent: ``host:port`` of the local Consul agent.
        service_name: Catalog service whose tags are maintained.
        replace_role_tags: Drop earlier active/standby tags before adding
            the new one instead of appending.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    command: str = Field(..., description="Health probe command line")
    result_true: str = Field(..., description="Probe output meaning active")
    result_false: str = Field(..., description="Probe output meaning standby")
    data_dir: Path = Field(..., description="Consul data directory")
    agent: str = Field(..., min_length=1, description="Consul agent host:port")
    service_name: str = Field(default=DEFAULT_SERVICE_NAME, min_length=1)
    replace_role_tags: bool = Field(default=False)

    @field_validator("command")
    @classmethod
    def _command_not_blank(cls, value: str) -> str:
        if not value.split():
            raise ValueError("command must name a program to run")
        return value

    @field_validator("agent")
    @classmethod
    def _agent_is_host_port(cls, value: str) -> str:
        try:
            url = httpx.URL(f"http://{value}")
        except httpx.InvalidURL as e:
            raise ValueError(f"agent is not a valid host:port: {e}") from e
        if not url.host:
            raise ValueError("agent must name a host")
        return value

    @property
    def node_id_path(self) -> Path:
        """Location of the node identifier file."""
        return self.data_dir / "node-id"

    @classmethod
    def from_env(
        cls,
        *,
        command: str,
        result_true: str,
        result_false: str,
        service_name: str = DEFAULT_SERVICE_NAME,
        replace_role_tags: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> ModelTagSyncConfig:
        """Build a configuration from CLI values and the process environment.

        Raises:
            ProtocolConfigurationError: If an environment variable is missing
                or empty, or a value fails validation.
        """
        env = os.environ if environ is None else environ
        resolved: dict[str, str] = {}
        for name in (ENV_CONSUL_DATA_DIR, ENV_CONSUL_AGENT):
            value = env.get(name, "")
            if not value:
                raise ProtocolConfigurationError(
                    f"Missing required environment variable {name}",
                    env_var=name,
                )
            resolved[name] = value

        try:
            return cls(
                command=command,
                result_true=result_true,
                result_false=result_false,
                data_dir=Path(resolved[ENV_CONSUL_DATA_DIR]),
                agent=resolved[ENV_CONSUL_AGENT],
                service_name=service_name,
                replace_role_tags=replace_role_tags,
            )
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise ProtocolConfigurationError(
                f"Invalid configuration: {fields or 'unknown field'}",
                validation_errors=e.error_count(),
            ) from e


__all__ = [
    "DEFAULT_SERVICE_NAME",
    "ENV_CONSUL_AGENT",
    "ENV_CONSUL_DATA_DIR",
    "ModelTagSyncConfig",
]
