# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for consul_tags tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

NODE_ID = "abc-123"
AGENT = "127.0.0.1:8500"


class FakeConsulAgent:
    """In-memory stand-in for the Consul agent HTTP API.

    Serves ``lookup_body`` for catalog lookups, records every request, and
    answers registrations with ``register_body``.
    """

    def __init__(
        self,
        lookup_body: object,
        *,
        lookup_status: int = 200,
        register_body: str = "true",
        register_status: int = 200,
    ) -> None:
        self.lookup_body = lookup_body
        self.lookup_status = lookup_status
        self.register_body = register_body
        self.register_status = register_status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET" and request.url.path.startswith(
            "/v1/catalog/service/"
        ):
            content = (
                self.lookup_body
                if isinstance(self.lookup_body, str)
                else json.dumps(self.lookup_body)
            )
            return httpx.Response(
                self.lookup_status,
                content=content.encode(),
                headers={"content-type": "application/json"},
            )
        if request.method == "PUT" and request.url.path == "/v1/catalog/register":
            return httpx.Response(
                self.register_status, content=self.register_body.encode()
            )
        return httpx.Response(404, content=b"not found")

    @property
    def puts(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "PUT"]

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture
def catalog_record() -> dict[str, object]:
    """A lookup record as the catalog returns it."""
    return {
        "ID": NODE_ID,
        "Node": "db-01",
        "Address": "10.0.0.11",
        "Datacenter": "dc1",
        "TaggedAddresses": {"lan": "10.0.0.11", "wan": "203.0.113.11"},
        "NodeMeta": {"consul-network-segment": "", "rack": "r1"},
        "ServiceKind": "",
        "ServiceID": "mysql-orchestrator-db-01",
        "ServiceName": "mysql-orchestrator",
        "ServiceTags": ["mysql", "v8"],
        "ServiceAddress": "",
        "ServicePort": 3306,
        "CreateIndex": 17,
        "ModifyIndex": 42,
    }


@pytest.fixture
def make_agent() -> Callable[..., FakeConsulAgent]:
    return FakeConsulAgent


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A Consul data directory holding a node-id file."""
    (tmp_path / "node-id").write_text(NODE_ID, encoding="utf-8")
    return tmp_path
