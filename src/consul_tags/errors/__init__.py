# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""consul_tags Errors Module.

Exports:
    ModelInfraErrorContext: Configuration model for bundled error context
    TagSyncError: Base error class
    ProtocolConfigurationError: Missing/invalid configuration
    NodeIdentityError: node-id file unreadable or empty
    HealthProbeError: Probe execution or decoding failure
    CatalogResponseError: Unusable catalog response
    InfraConnectionError: Catalog agent transport failure
    InfraConsulError: Consul-specific transport failure

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - ACL tokens or other credentials
        - Full probe output (it may contain anything)

    SAFE to include:
        - Agent address, service name, node id
        - Operation names and HTTP status codes
        - Correlation IDs
"""

from consul_tags.errors.error_consul import InfraConsulError
from consul_tags.errors.infra_errors import (
    CatalogResponseError,
    HealthProbeError,
    InfraConnectionError,
    NodeIdentityError,
    ProtocolConfigurationError,
    TagSyncError,
)
from consul_tags.errors.model_infra_error_context import ModelInfraErrorContext

__all__: list[str] = [
    # Configuration model
    "ModelInfraErrorContext",
    # Error classes
    "TagSyncError",
    "ProtocolConfigurationError",
    "NodeIdentityError",
    "HealthProbeError",
    "CatalogResponseError",
    "InfraConnectionError",
    "InfraConsulError",
]
