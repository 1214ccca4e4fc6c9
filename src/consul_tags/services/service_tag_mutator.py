# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Catalog Mutator.

Turns a looked-up service record plus the classified role tags into the
registration body. Only the tag list changes; every other field passes
through unchanged.

By default the new tags are appended after the existing ones with no
de-duplication, so repeated runs accumulate role tags. With
``replace_role_tags`` the earlier ``active``/``standby`` tags are removed
first, which makes repeated runs idempotent. Replacement only happens when a
role was classified.
"""

from __future__ import annotations

from collections.abc import Sequence

from consul_tags.enums import EnumServiceRole
from consul_tags.models import (
    ModelCatalogRegistration,
    ModelCatalogRegistrationService,
    ModelCatalogService,
)


def merge_tags(
    existing: Sequence[str],
    new_tags: Sequence[str],
    *,
    replace_role_tags: bool = False,
) -> list[str]:
    """Return existing tags followed by ``new_tags``."""
    if replace_role_tags and new_tags:
        role_tags = EnumServiceRole.tag_values()
        kept = [tag for tag in existing if tag not in role_tags]
    else:
        kept = list(existing)
    return kept + list(new_tags)


def build_registration(
    record: ModelCatalogService,
    tags: Sequence[str],
    *,
    replace_role_tags: bool = False,
) -> ModelCatalogRegistration:
    """Re-shape a lookup record into a registration with the new tags."""
    return ModelCatalogRegistration(
        datacenter=record.datacenter,
        id=record.id,
        node=record.node,
        address=record.address,
        tagged_addresses=dict(record.tagged_addresses),
        node_meta=dict(record.node_meta),
        service=ModelCatalogRegistrationService(
            id=record.service_id,
            service=record.service_name,
            tags=merge_tags(
                record.service_tags, tags, replace_role_tags=replace_role_tags
            ),
            port=record.service_port,
        ),
    )


__all__ = ["build_registration", "merge_tags"]
