# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for consul_tags."""

from consul_tags.models.model_catalog_registration import (
    ModelCatalogRegistration,
    ModelCatalogRegistrationService,
)
from consul_tags.models.model_catalog_service import (
    CatalogServiceList,
    ModelCatalogService,
)
from consul_tags.models.model_tag_sync_config import (
    DEFAULT_SERVICE_NAME,
    ENV_CONSUL_AGENT,
    ENV_CONSUL_DATA_DIR,
    ModelTagSyncConfig,
)

__all__: list[str] = [
    "CatalogServiceList",
    "DEFAULT_SERVICE_NAME",
    "ENV_CONSUL_AGENT",
    "ENV_CONSUL_DATA_DIR",
    "ModelCatalogRegistration",
    "ModelCatalogRegistrationService",
    "ModelCatalogService",
    "ModelTagSyncConfig",
]
