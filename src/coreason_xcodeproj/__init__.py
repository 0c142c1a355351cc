# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

"""
coreason-xcodeproj
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .config import ProjectConfig
from .exceptions import DanglingReferenceError, UnboundObjectError, UnknownObjectError, XcodeProjectError
from .identifiers import ObjectId
from .models import (
    BuildFile,
    BuildPhase,
    FileReference,
    FrameworksBuildPhase,
    ResourcesBuildPhase,
    SourcesBuildPhase,
    framework,
    identity_key,
    resources,
    sources,
)
from .registry import ObjectRegistry

__all__ = [
    "ProjectConfig",
    "ObjectRegistry",
    "ObjectId",
    "FileReference",
    "BuildFile",
    "BuildPhase",
    "FrameworksBuildPhase",
    "SourcesBuildPhase",
    "ResourcesBuildPhase",
    "framework",
    "sources",
    "resources",
    "identity_key",
    "XcodeProjectError",
    "UnknownObjectError",
    "DanglingReferenceError",
    "UnboundObjectError",
]
