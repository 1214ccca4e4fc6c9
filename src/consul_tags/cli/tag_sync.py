# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""consul-tags CLI — publish a node's active/standby role as catalog tags.

Runs a health probe, classifies its output, and re-registers this node's
service in the Consul catalog with the role tag added.

Usage
-----
    CONSUL_DATA_DIR=/opt/consul CONSUL_AGENT=127.0.0.1:8500 \\
    consul-tags \\
        --command "/usr/local/bin/is-primary --quiet" \\
        --result-true true \\
        --result-false false

Output
------
Standard output carries only the raw body of the catalog register response.
Logs go to stderr.

Exit Codes
----------
    0  registration submitted
    1  unexpected tag sync failure
    2  configuration error (missing flag or environment variable)
    3  node-id file unreadable or empty
    4  health probe could not run or produced non-UTF-8 output
    5  catalog returned an unusable lookup response
    6  catalog agent unreachable
"""

from __future__ import annotations

import logging
from uuid import UUID, uuid4

import click
import httpx
from rich.console import Console
from rich.markup import escape

from consul_tags.errors import TagSyncError
from consul_tags.handlers import ConsulCatalogHandler, read_node_id
from consul_tags.models import DEFAULT_SERVICE_NAME, ModelTagSyncConfig
from consul_tags.services import build_registration, classify_role, run_probe

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


def run_tag_sync(
    config: ModelTagSyncConfig,
    *,
    client: httpx.Client | None = None,
    correlation_id: UUID | None = None,
) -> str:
    """Run one probe/lookup/register cycle and return the register response body.

    Raises:
        TagSyncError: On any failure; nothing is registered if the failure
            happens before the register call.
    """
    output = run_probe(config.command, correlation_id=correlation_id)
    tags = classify_role(output, config.result_true, config.result_false)
    if tags:
        logger.info("Run %s classified role tags: %s", correlation_id, tags)
    else:
        logger.info(
            "Run %s: probe output matched neither expected result; no role tag",
            correlation_id,
        )

    node_id = read_node_id(config.node_id_path, correlation_id=correlation_id)

    with ConsulCatalogHandler(
        config.agent,
        config.service_name,
        client=client,
        correlation_id=correlation_id,
    ) as handler:
        record = handler.lookup_service(node_id)
        registration = build_registration(
            record, tags, replace_role_tags=config.replace_role_tags
        )
        logger.info(
            "Run %s registering %s on node %s with tags %s",
            correlation_id,
            registration.service.id,
            registration.node,
            registration.service.tags,
        )
        return handler.register(registration)


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level)


@click.command()
@click.option("--command", required=True, help="Health-check command line.")
@click.option(
    "--result-true",
    required=True,
    help="Probe output (exact) that marks this node active.",
)
@click.option(
    "--result-false",
    required=True,
    help="Probe output (exact) that marks this node standby.",
)
@click.option(
    "--service-name",
    default=DEFAULT_SERVICE_NAME,
    show_default=True,
    help="Catalog service whose tags are updated.",
)
@click.option(
    "--replace-role-tags/--append-role-tags",
    default=False,
    show_default=True,
    help="Remove earlier active/standby tags before adding the new one.",
)
@click.option("-v", "--verbose", count=True, help="INFO logging; repeat for DEBUG.")
def cli(
    command: str,
    result_true: str,
    result_false: str,
    service_name: str,
    replace_role_tags: bool,
    verbose: int,
) -> None:
    """Update this node's catalog service tags from a health probe result.

    Reads CONSUL_DATA_DIR and CONSUL_AGENT from the environment.
    """
    _configure_logging(verbose)
    correlation_id = uuid4()
    logger.debug("Tag sync run %s", correlation_id)

    try:
        config = ModelTagSyncConfig.from_env(
            command=command,
            result_true=result_true,
            result_false=result_false,
            service_name=service_name,
            replace_role_tags=replace_role_tags,
        )
        body = run_tag_sync(config, correlation_id=correlation_id)
    except TagSyncError as e:
        logger.debug("Tag sync run %s failed", correlation_id, exc_info=True)
        detail = escape(f"[{e.error_code.value}]: {e}")
        err_console.print(
            f"[bold red]ERROR[/bold red] {detail}",
            soft_wrap=True,
        )
        raise SystemExit(e.exit_code) from e

    click.echo(body)


def main() -> None:
    """Entry point for consul-tags CLI."""
    cli()


__all__ = ["cli", "main", "run_tag_sync"]
