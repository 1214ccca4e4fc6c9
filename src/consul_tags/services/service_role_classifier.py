# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Role Classifier.

Maps probe output to the role tags to add. Comparison is exact string
equality (no trimming, no case folding). Output matching neither expected
string yields no tag, leaving the node's existing tags as they are.
"""

from __future__ import annotations

from consul_tags.enums import EnumServiceRole


def classify_role(output: str, result_true: str, result_false: str) -> list[str]:
    """Return ``["active"]``, ``["standby"]`` or ``[]`` for the probe output.

    ``result_true`` is checked first, so it wins when both expected strings
    are equal.
    """
    if output == result_true:
        return [EnumServiceRole.ACTIVE.value]
    if output == result_false:
        return [EnumServiceRole.STANDBY.value]
    return []


__all__ = ["classify_role"]
