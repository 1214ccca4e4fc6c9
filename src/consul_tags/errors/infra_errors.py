# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tag Sync Error Classes.

Error Hierarchy:
    TagSyncError (base)
    ├── ProtocolConfigurationError   configuration
    ├── NodeIdentityError            node-id file I/O
    ├── HealthProbeError             probe subprocess
    ├── CatalogResponseError         unusable catalog response
    └── InfraConnectionError         catalog agent transport
        └── InfraConsulError (errors.error_consul)

All errors:
    - Carry an EnumTagSyncErrorCode that selects the CLI exit status
    - Support proper error chaining with ``raise ... from e``
    - Accept ModelInfraErrorContext for bundled context parameters
    - Accept extra keyword context for debugging (never secrets)
"""

from __future__ import annotations

from uuid import UUID

from consul_tags.enums import EnumTagSyncErrorCode
from consul_tags.errors.model_infra_error_context import ModelInfraErrorContext


class TagSyncError(Exception):
    """Base error class for tag sync failures.

    Structured Fields (via ModelInfraErrorContext):
        transport_type: Type of transport (consul, process, filesystem)
        operation: Operation being performed
        correlation_id: Run correlation ID
        target_name: Target resource/endpoint name

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.CONSUL,
        ...     operation="register",
        ...     target_name="127.0.0.1:8500",
        ... )
        >>> raise TagSyncError("Operation failed", context=context, status=500)
    """

    default_error_code: EnumTagSyncErrorCode = EnumTagSyncErrorCode.TAG_SYNC_FAILED

    def __init__(
        self,
        message: str,
        error_code: EnumTagSyncErrorCode | None = None,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize TagSyncError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to the class default)
            context: Bundled infrastructure context
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code

        structured_context: dict[str, object] = dict(extra_context)
        self.correlation_id: UUID | None = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            self.correlation_id = context.correlation_id
        self.context = structured_context

    @property
    def exit_code(self) -> int:
        """Process exit status for this error."""
        return self.error_code.exit_code

    def __str__(self) -> str:
        return self.message


class ProtocolConfigurationError(TagSyncError):
    """Raised when run configuration is missing or invalid.

    Example:
        >>> raise ProtocolConfigurationError(
        ...     "Missing required environment variable CONSUL_AGENT",
        ...     env_var="CONSUL_AGENT",
        ... )
    """

    default_error_code = EnumTagSyncErrorCode.INVALID_CONFIGURATION


class NodeIdentityError(TagSyncError):
    """Raised when the node identifier cannot be read from the data directory."""

    default_error_code = EnumTagSyncErrorCode.NODE_IDENTITY_UNAVAILABLE


class HealthProbeError(TagSyncError):
    """Raised when the health probe cannot run or its output is not text.

    Example:
        >>> raise HealthProbeError(
        ...     "Failed to execute health probe",
        ...     context=context,
        ...     program="/usr/local/bin/check-role",
        ... )
    """

    default_error_code = EnumTagSyncErrorCode.PROBE_FAILED


class CatalogResponseError(TagSyncError):
    """Raised when the catalog answers with a response that cannot be used.

    Covers non-2xx lookup status, malformed JSON, unexpected record shape,
    and an empty lookup result.
    """

    default_error_code = EnumTagSyncErrorCode.CATALOG_PROTOCOL_ERROR


class InfraConnectionError(TagSyncError):
    """Raised when the catalog agent cannot be reached.

    Example:
        >>> raise InfraConnectionError(
        ...     "Failed to connect to catalog agent",
        ...     context=context,
        ...     host="127.0.0.1",
        ...     port=8500,
        ... )
    """

    default_error_code = EnumTagSyncErrorCode.CATALOG_CONNECTION_ERROR


__all__ = [
    "TagSyncError",
    "ProtocolConfigurationError",
    "NodeIdentityError",
    "HealthProbeError",
    "CatalogResponseError",
    "InfraConnectionError",
]
