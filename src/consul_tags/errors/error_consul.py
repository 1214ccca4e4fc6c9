# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul-Specific Infrastructure Error Class.

This module defines the InfraConsulError class for transport failures while
talking to the Consul catalog HTTP API.
"""

from consul_tags.errors.infra_errors import InfraConnectionError
from consul_tags.errors.model_infra_error_context import ModelInfraErrorContext


class InfraConsulError(InfraConnectionError):
    """Error communicating with the Consul agent.

    Used for connection failures and other transport errors on the catalog
    lookup and registration calls. The context should use
    ``transport_type=EnumInfraTransportType.CONSUL``.

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.CONSUL,
        ...     operation="register",
        ...     target_name="127.0.0.1:8500",
        ... )
        >>> raise InfraConsulError(
        ...     "Failed to register service with Consul",
        ...     context=context,
        ...     service_name="mysql-orchestrator",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        service_name: str | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize InfraConsulError with Consul-specific context.

        Args:
            message: Human-readable error message
            context: Bundled infrastructure context (should use CONSUL transport_type)
            service_name: Optional catalog service name involved in the call
            **extra_context: Additional context information (e.g., url)
        """
        if service_name is not None:
            extra_context["service_name"] = service_name

        super().__init__(
            message,
            context=context,
            **extra_context,
        )


__all__: list[str] = [
    "InfraConsulError",
]
