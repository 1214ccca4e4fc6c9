# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Catalog Registration Models.

Body of ``PUT /v1/catalog/register``. The registration schema nests the
service fields under ``Service`` where the lookup schema keeps them flat.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelCatalogRegistrationService(BaseModel):
    """Nested ``Service`` block of a catalog registration."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    id: str = Field(..., alias="ID")
    service: str = Field(..., alias="Service")
    tags: list[str] = Field(default_factory=list, alias="Tags")
    port: int = Field(..., alias="Port")


class ModelCatalogRegistration(BaseModel):
    """Node plus service record submitted to the catalog register endpoint.

    The catalog upserts on (Node, Service.ID): the previous record for the
    pair is replaced in full.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    datacenter: str = Field(..., alias="Datacenter")
    id: str = Field(..., alias="ID")
    node: str = Field(..., alias="Node")
    address: str = Field(..., alias="Address")
    tagged_addresses: dict[str, str] = Field(
        default_factory=dict, alias="TaggedAddresses"
    )
    node_meta: dict[str, str] = Field(default_factory=dict, alias="NodeMeta")
    service: ModelCatalogRegistrationService = Field(..., alias="Service")

    def to_json(self) -> str:
        """Serialise with the catalog's PascalCase keys."""
        return self.model_dump_json(by_alias=True)


__all__ = ["ModelCatalogRegistration", "ModelCatalogRegistrationService"]
