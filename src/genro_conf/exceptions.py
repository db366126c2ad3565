# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Conf exceptions."""

from __future__ import annotations


class ConfError(Exception):
    """Base exception for Conf errors."""

    pass


class UnsupportedTypeError(ConfError, TypeError):
    """Raised when a value's runtime type has no value type tag.

    Attributes:
        key: The key that was being written or read.
        type_name: Description of the offending runtime type.
    """

    def __init__(self, key: str, type_name: str) -> None:
        self.key = key
        self.type_name = type_name
        super().__init__(f'Unsupported type provided for "{key}": "{type_name}".')


class InvalidKeyError(ConfError, ValueError):
    """Raised when a key contains the internal typed key separator."""

    def __init__(self, key: str, separator: str) -> None:
        self.key = key
        super().__init__(
            f'Invalid key specified: "{key}". '
            f'The key cannot include the internal separator: "{separator}"'
        )


class TreeError(ConfError):
    """Raised on structural misuse of a value tree (cycles, destroyed nodes)."""

    pass
