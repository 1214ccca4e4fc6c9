# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Transport Type Enumeration.

Defines the transport types a tag sync run touches. Used for error context
and log correlation.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Transport types used by consul_tags.

    Attributes:
        CONSUL: Consul catalog HTTP API
        FILESYSTEM: Local file reads (node-id)
        PROCESS: Health probe subprocess execution
    """

    CONSUL = "consul"
    FILESYSTEM = "filesystem"
    PROCESS = "process"


__all__ = ["EnumInfraTransportType"]
