# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Allow ``python -m consul_tags``."""

from consul_tags.cli.tag_sync import main

if __name__ == "__main__":
    main()
