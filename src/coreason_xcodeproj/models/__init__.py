# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

from .build_phase import (
    BuildPhase,
    FrameworksBuildPhase,
    ResourcesBuildPhase,
    SourcesBuildPhase,
    framework,
    resources,
    sources,
)
from .objects import BuildFile, FileReference, PBXObject, identity_key

__all__ = [
    "PBXObject",
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
]
