# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Probe, classification and tag mutation services."""

from consul_tags.services.service_health_probe import run_probe, split_command
from consul_tags.services.service_role_classifier import classify_role
from consul_tags.services.service_tag_mutator import build_registration, merge_tags

__all__: list[str] = [
    "build_registration",
    "classify_role",
    "merge_tags",
    "run_probe",
    "split_command",
]
