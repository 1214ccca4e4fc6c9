# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consul Catalog Handler - lookup and registration over the catalog HTTP API.

Supported Operations:
    - read_node_id: Read this node's ID from ``<data_dir>/node-id``
    - lookup_service: ``GET /v1/catalog/service/<service>?filter=ID == "<id>"``
    - register: ``PUT /v1/catalog/register`` with a full node+service record

Each call is made once, synchronously, with no timeout and no retry. The
register call overwrites the previous record for (Node, Service.ID); there is
no check-and-set, so two concurrent runs against one node can race on the
read-modify-write cycle.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from uuid import UUID

import httpx
from pydantic import ValidationError

from consul_tags.enums import EnumInfraTransportType
from consul_tags.errors import (
    CatalogResponseError,
    InfraConsulError,
    ModelInfraErrorContext,
    NodeIdentityError,
)
from consul_tags.models import (
    DEFAULT_SERVICE_NAME,
    CatalogServiceList,
    ModelCatalogRegistration,
    ModelCatalogService,
)

logger = logging.getLogger(__name__)

CATALOG_SERVICE_PATH = "/v1/catalog/service/{service}"
CATALOG_REGISTER_PATH = "/v1/catalog/register"


def node_id_filter(node_id: str) -> str:
    """Catalog filter expression selecting the record for ``node_id``."""
    return f'ID == "{node_id}"'


def read_node_id(path: Path, correlation_id: UUID | None = None) -> str:
    """Read the node identifier, stripping surrounding whitespace.

    Raises:
        NodeIdentityError: If the file cannot be read, is not UTF-8, or is empty.
    """
    ctx = ModelInfraErrorContext(
        transport_type=EnumInfraTransportType.FILESYSTEM,
        operation="read_node_id",
        target_name=str(path),
        correlation_id=correlation_id,
    )
    try:
        node_id = path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise NodeIdentityError(
            f"Failure reading node-id from {path}", context=ctx
        ) from e
    if not node_id:
        raise NodeIdentityError(f"node-id file {path} is empty", context=ctx)
    return node_id


class ConsulCatalogHandler:
    """Consul catalog client for one service on the local agent.

    Args:
        agent: ``host:port`` of the Consul agent.
        service_name: Catalog service to look up.
        client: Optional pre-built ``httpx.Client`` (tests inject one with a
            mock transport). A client created here is closed by ``close()``.
        correlation_id: Run correlation ID attached to errors.
    """

    def __init__(
        self,
        agent: str,
        service_name: str = DEFAULT_SERVICE_NAME,
        *,
        client: httpx.Client | None = None,
        correlation_id: UUID | None = None,
    ) -> None:
        self._agent = agent
        self._service_name = service_name
        self._base_url = f"http://{agent}"
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=None)
        self._correlation_id = correlation_id

    def __enter__(self) -> ConsulCatalogHandler:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _context(self, operation: str) -> ModelInfraErrorContext:
        return ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.CONSUL,
            operation=operation,
            target_name=self._agent,
            correlation_id=self._correlation_id,
        )

    @property
    def lookup_url(self) -> str:
        return self._base_url + CATALOG_SERVICE_PATH.format(
            service=self._service_name
        )

    @property
    def register_url(self) -> str:
        return self._base_url + CATALOG_REGISTER_PATH

    def lookup_service(self, node_id: str) -> ModelCatalogService:
        """Return the service record registered for ``node_id``.

        Raises:
            InfraConsulError: On any transport failure.
            CatalogResponseError: On non-2xx status, malformed body, or an
                empty result.
        """
        ctx = self._context("lookup_service")
        params = {"filter": node_id_filter(node_id)}
        logger.debug(
            "Run %s catalog lookup %s params=%s",
            self._correlation_id,
            self.lookup_url,
            params,
        )

        try:
            response = self._client.get(self.lookup_url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise InfraConsulError(
                f"HTTP error during catalog lookup: {type(e).__name__}",
                context=ctx,
                service_name=self._service_name,
            ) from e

        if not response.is_success:
            raise CatalogResponseError(
                f"Catalog lookup returned HTTP {response.status_code}",
                context=ctx,
                status_code=response.status_code,
                service_name=self._service_name,
            )

        try:
            records = CatalogServiceList.validate_json(response.content)
        except ValidationError as e:
            raise CatalogResponseError(
                "Service catalog JSON parse failure",
                context=ctx,
                validation_errors=e.error_count(),
            ) from e

        if not records:
            raise CatalogResponseError(
                f"No {self._service_name} service registered for node {node_id}",
                context=ctx,
                node_id=node_id,
                service_name=self._service_name,
            )
        if len(records) > 1:
            logger.warning(
                "Run %s: catalog lookup for node %s returned %d records; "
                "using the first",
                self._correlation_id,
                node_id,
                len(records),
            )
        return records[0]

    def register(self, registration: ModelCatalogRegistration) -> str:
        """Submit ``registration`` and return the raw response body.

        The body is returned whatever the status code; a non-2xx status is
        only logged.

        Raises:
            InfraConsulError: On any transport failure.
        """
        ctx = self._context("register")
        try:
            response = self._client.put(
                self.register_url,
                content=registration.to_json(),
                headers={"Content-Type": "application/json"},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise InfraConsulError(
                f"HTTP error during catalog register: {type(e).__name__}",
                context=ctx,
                service_name=registration.service.service,
            ) from e

        if not response.is_success:
            logger.warning(
                "Run %s: catalog register returned HTTP %d for node %s",
                self._correlation_id,
                response.status_code,
                registration.node,
            )
        return response.text


__all__ = [
    "CATALOG_REGISTER_PATH",
    "CATALOG_SERVICE_PATH",
    "ConsulCatalogHandler",
    "node_id_filter",
    "read_node_id",
]
