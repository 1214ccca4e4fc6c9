# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for consul_tags."""

from consul_tags.enums.enum_infra_transport_type import EnumInfraTransportType
from consul_tags.enums.enum_service_role import EnumServiceRole
from consul_tags.enums.enum_tag_sync_error_code import EnumTagSyncErrorCode

__all__: list[str] = [
    "EnumInfraTransportType",
    "EnumServiceRole",
    "EnumTagSyncErrorCode",
]
