# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

"""Errors raised while manipulating the project object graph."""


class XcodeProjectError(Exception):
    """Base class for all project graph errors."""


class UnknownObjectError(XcodeProjectError, KeyError):
    """The registry holds no object for the requested identifier."""

    def __init__(self, identifier: str):
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"Unknown object identifier: {self.identifier}"


class DanglingReferenceError(XcodeProjectError, RuntimeError):
    """An object refers to an identifier that does not resolve to the expected object.

    The graph is inconsistent at this point, typically because an object was
    removed from the registry without updating the objects pointing at it.
    """

    def __init__(self, owner: str | None, identifier: str, expected: str):
        super().__init__(f"{owner or '<unregistered>'} references {identifier}, which is not a live {expected}")
        self.owner = owner
        self.identifier = identifier
        self.expected = expected


class UnboundObjectError(XcodeProjectError, RuntimeError):
    """An operation needed the registry but the object was never added to one."""
