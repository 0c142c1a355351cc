# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

import coreason_xcodeproj


def test_public_api() -> None:
    for name in coreason_xcodeproj.__all__:
        assert hasattr(coreason_xcodeproj, name), name


def test_version() -> None:
    assert coreason_xcodeproj.__version__ == "0.1.0"


def test_top_level_factories() -> None:
    registry = coreason_xcodeproj.ObjectRegistry()
    phase = coreason_xcodeproj.framework()
    registry.add_object(phase)
    ref = coreason_xcodeproj.FileReference(name="UIKit.framework", path="System/Library/Frameworks/UIKit.framework")
    registry.add_object(ref)

    phase.add_build_file(ref)

    assert phase.build_file("UIKit.framework") is ref
