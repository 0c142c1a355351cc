# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

from coreason_xcodeproj.identifiers import IDENTIFIER_LENGTH, IdentifierGenerator, derive_id, generate_id, is_valid_id


def test_generate_id_format() -> None:
    identifier = generate_id()
    assert len(identifier) == IDENTIFIER_LENGTH == 24
    assert identifier == identifier.upper()
    assert is_valid_id(identifier)


def test_derive_id_is_stable() -> None:
    assert derive_id("MyApp", "PBXBuildFile:1") == derive_id("MyApp", "PBXBuildFile:1")
    assert derive_id("MyApp", "PBXBuildFile:1") != derive_id("MyApp", "PBXBuildFile:2")
    assert derive_id("MyApp", "PBXBuildFile:1") != derive_id("Other", "PBXBuildFile:1")
    assert is_valid_id(derive_id("MyApp", "x"))


def test_is_valid_id_rejects_malformed() -> None:
    assert not is_valid_id("")
    assert not is_valid_id("7165D44D146B4EA100DE2F0")
    assert not is_valid_id("7165d44d146b4ea100de2f0e")
    assert not is_valid_id("7165D44D146B4EA100DE2F0G")
    assert is_valid_id("7165D44D146B4EA100DE2F0E")


def test_random_generator_does_not_repeat() -> None:
    generator = IdentifierGenerator()
    assert len({generator.next_id() for _ in range(1000)}) == 1000


def test_deterministic_generator_sequence() -> None:
    first = IdentifierGenerator("deterministic", "MyApp")
    second = IdentifierGenerator("deterministic", "MyApp")

    a = [first.next_id("PBXBuildFile") for _ in range(3)]
    b = [second.next_id("PBXBuildFile") for _ in range(3)]

    assert a == b
    assert len(set(a)) == 3
