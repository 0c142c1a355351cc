# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

"""Object identifiers.

Every object in a project file is addressed by a 24 character upper-case
hexadecimal token, e.g. ``7165D44D146B4EA100DE2F0E``.
"""

import uuid
from typing import Literal, NewType

IDENTIFIER_LENGTH = 24

ObjectId = NewType("ObjectId", str)


def generate_id() -> ObjectId:
    """Returns a random identifier."""
    return ObjectId(uuid.uuid4().hex[:IDENTIFIER_LENGTH].upper())


def derive_id(namespace: str, key: str) -> ObjectId:
    """Returns an identifier derived from ``key``; equal inputs give equal identifiers."""
    seed = uuid.uuid5(uuid.NAMESPACE_X500, namespace)
    return ObjectId(uuid.uuid5(seed, key).hex[:IDENTIFIER_LENGTH].upper())


def is_valid_id(value: str) -> bool:
    if len(value) != IDENTIFIER_LENGTH:
        return False
    return all(c in "0123456789ABCDEF" for c in value)


class IdentifierGenerator:
    """Mints identifiers for a single registry.

    Args:
        strategy: ``random`` draws from uuid4; ``deterministic`` hashes a running
            sequence number together with a per-object key so that building the
            same graph twice yields the same identifiers.
        namespace: Seed for the deterministic strategy.
    """

    def __init__(self, strategy: Literal["random", "deterministic"] = "random", namespace: str = ""):
        self.strategy = strategy
        self.namespace = namespace
        self._sequence = 0

    def next_id(self, key: str = "") -> ObjectId:
        self._sequence += 1
        if self.strategy == "deterministic":
            return derive_id(self.namespace, f"{key}:{self._sequence}")
        return generate_id()
