# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Health Probe Runner.

Runs the configured health-check command and returns its standard output.
The command line is split on runs of whitespace; there is no shell quoting,
so an argument cannot contain a space. The probe runs synchronously with no
deadline. Its exit status is not interpreted: only stdout carries the role
signal.
"""

from __future__ import annotations

import logging
import subprocess
from uuid import UUID

from consul_tags.enums import EnumInfraTransportType
from consul_tags.errors import (
    HealthProbeError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
)

logger = logging.getLogger(__name__)


def split_command(command: str) -> list[str]:
    """Split a command line into program and arguments on whitespace.

    Raises:
        ProtocolConfigurationError: If the command is empty.
    """
    argv = command.split()
    if not argv:
        raise ProtocolConfigurationError("Health probe command is empty")
    return argv


def run_probe(command: str, correlation_id: UUID | None = None) -> str:
    """Execute the probe and return its stdout decoded as UTF-8.

    Args:
        command: Full command line.
        correlation_id: Run correlation ID attached to errors.

    Raises:
        ProtocolConfigurationError: If the command is empty.
        HealthProbeError: If the program cannot be executed or its output
            is not valid UTF-8.
    """
    argv = split_command(command)
    ctx = ModelInfraErrorContext(
        transport_type=EnumInfraTransportType.PROCESS,
        operation="run_probe",
        target_name=argv[0],
        correlation_id=correlation_id,
    )

    logger.debug("Run %s running health probe %s", correlation_id, argv)
    try:
        completed = subprocess.run(argv, stdout=subprocess.PIPE, check=False)
    except OSError as e:
        raise HealthProbeError(
            f"Failed to execute health probe '{command}'",
            context=ctx,
            program=argv[0],
        ) from e

    if completed.returncode != 0:
        logger.warning(
            "Run %s: health probe %s exited with status %d",
            correlation_id,
            argv[0],
            completed.returncode,
        )

    try:
        return completed.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HealthProbeError(
            "Health probe output is not valid UTF-8",
            context=ctx,
            program=argv[0],
        ) from e


__all__ = ["run_probe", "split_command"]
