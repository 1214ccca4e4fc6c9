# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tag Sync Error Code Enumeration.

One code per failure category. The CLI maps each code to a distinct
process exit status via ``exit_code``.
"""

from enum import Enum


class EnumTagSyncErrorCode(str, Enum):
    """Error codes for tag sync failures.

    Attributes:
        TAG_SYNC_FAILED: Failure outside the categories below
        INVALID_CONFIGURATION: Missing environment variable or bad argument
        NODE_IDENTITY_UNAVAILABLE: node-id file missing, unreadable or empty
        PROBE_FAILED: Health probe could not run or produced non-text output
        CATALOG_PROTOCOL_ERROR: Catalog answered with an unusable response
        CATALOG_CONNECTION_ERROR: Catalog agent unreachable or transport failure
    """

    TAG_SYNC_FAILED = "TAG_SYNC_FAILED"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    NODE_IDENTITY_UNAVAILABLE = "NODE_IDENTITY_UNAVAILABLE"
    PROBE_FAILED = "PROBE_FAILED"
    CATALOG_PROTOCOL_ERROR = "CATALOG_PROTOCOL_ERROR"
    CATALOG_CONNECTION_ERROR = "CATALOG_CONNECTION_ERROR"

    @property
    def exit_code(self) -> int:
        """Process exit status reported for this error code."""
        return _EXIT_CODES[self]


_EXIT_CODES: dict[EnumTagSyncErrorCode, int] = {
    EnumTagSyncErrorCode.TAG_SYNC_FAILED: 1,
    EnumTagSyncErrorCode.INVALID_CONFIGURATION: 2,
    EnumTagSyncErrorCode.NODE_IDENTITY_UNAVAILABLE: 3,
    EnumTagSyncErrorCode.PROBE_FAILED: 4,
    EnumTagSyncErrorCode.CATALOG_PROTOCOL_ERROR: 5,
    EnumTagSyncErrorCode.CATALOG_CONNECTION_ERROR: 6,
}


__all__ = ["EnumTagSyncErrorCode"]
