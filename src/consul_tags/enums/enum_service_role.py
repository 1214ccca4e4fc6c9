# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Service role enumeration.

The string values are the literal tags written to the catalog.
"""

from enum import Enum


class EnumServiceRole(str, Enum):
    """Operational role of a node, expressed as a catalog service tag."""

    ACTIVE = "active"
    STANDBY = "standby"

    @classmethod
    def tag_values(cls) -> frozenset[str]:
        """Return every tag value owned by this enum."""
        return frozenset(role.value for role in cls)


__all__ = ["EnumServiceRole"]
