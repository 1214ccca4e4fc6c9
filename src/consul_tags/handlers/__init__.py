# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure handlers for consul_tags."""

from consul_tags.handlers.handler_consul_catalog import (
    ConsulCatalogHandler,
    node_id_filter,
    read_node_id,
)

__all__: list[str] = [
    "ConsulCatalogHandler",
    "node_id_filter",
    "read_node_id",
]
