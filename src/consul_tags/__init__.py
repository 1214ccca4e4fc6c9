# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""consul_tags - publish a node's active/standby role as Consul catalog tags.

A one-shot CLI meant to be run from a timer: it runs a health probe,
classifies the output as active or standby, and re-registers the node's
service in the Consul catalog with the role tag added.
"""

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
