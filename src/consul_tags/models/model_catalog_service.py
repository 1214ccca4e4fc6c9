# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Catalog Service Lookup Model.

One element of the JSON array returned by
``GET /v1/catalog/service/<service>``. Field names follow the catalog's
PascalCase keys through aliases; keys this tool does not use
(``ServiceAddress``, ``CreateIndex``, ...) are ignored.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter


def _none_to_dict(value: object) -> object:
    return {} if value is None else value


def _none_to_list(value: object) -> object:
    return [] if value is None else value


# The catalog serialises empty maps and tag lists as JSON null
StringMap = Annotated[dict[str, str], BeforeValidator(_none_to_dict)]
TagList = Annotated[list[str], BeforeValidator(_none_to_list)]


class ModelCatalogService(BaseModel):
    """A service instance on a node, as returned by a catalog lookup.

    Attributes:
        datacenter: Datacenter the node belongs to.
        id: Unique node ID (the contents of ``<data_dir>/node-id``).
        node: Node name.
        address: Node address.
        tagged_addresses: Named alternate addresses of the node.
        node_meta: Node metadata key/value pairs.
        service_id: Service instance ID.
        service_name: Service name.
        service_tags: Ordered service tags.
        service_port: Service port.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    datacenter: str = Field(..., alias="Datacenter")
    id: str = Field(..., alias="ID")
    node: str = Field(..., alias="Node")
    address: str = Field(..., alias="Address")
    tagged_addresses: StringMap = Field(
        default_factory=dict, alias="TaggedAddresses"
    )
    node_meta: StringMap = Field(default_factory=dict, alias="NodeMeta")
    service_id: str = Field(..., alias="ServiceID")
    service_name: str = Field(..., alias="ServiceName")
    service_tags: TagList = Field(default_factory=list, alias="ServiceTags")
    service_port: int = Field(..., alias="ServicePort")


CatalogServiceList = TypeAdapter(list[ModelCatalogService])
"""Validator for a full lookup response body."""


__all__ = ["CatalogServiceList", "ModelCatalogService"]
