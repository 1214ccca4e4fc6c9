# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Context Configuration Model.

Bundles the structured fields every tag sync error carries so error
constructors keep a short parameter list.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from consul_tags.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Configuration model for infrastructure error context.

    Attributes:
        transport_type: Transport the failing operation used
        operation: Operation being performed (read_node_id, lookup_service, ...)
        target_name: Target resource or endpoint name
        correlation_id: Per-run correlation ID

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.CONSUL,
        ...     operation="lookup_service",
        ...     target_name="127.0.0.1:8500",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise CatalogResponseError("Empty lookup result", context=context)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    transport_type: EnumInfraTransportType | None = Field(
        default=None,
        description="Type of infrastructure transport (CONSUL, PROCESS, ...)",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: str | None = Field(
        default=None,
        description="Target resource or endpoint name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Run correlation ID for log tracing",
    )


__all__ = ["ModelInfraErrorContext"]
