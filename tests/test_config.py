# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from coreason_xcodeproj.config import ProjectConfig


def test_config_defaults() -> None:
    with patch.dict("os.environ", {}, clear=True):
        config = ProjectConfig()
    assert config.identifier_strategy == "random"
    assert config.identifier_namespace == "coreason-xcodeproj"
    assert config.max_identifier_attempts == 16
    assert config.log_level == "INFO"
    assert config.log_dir == "logs"


def test_config_reads_environment() -> None:
    env = {
        "COREASON_XCODEPROJ_IDENTIFIER_STRATEGY": "deterministic",
        "COREASON_XCODEPROJ_IDENTIFIER_NAMESPACE": "MyApp",
        "COREASON_XCODEPROJ_MAX_IDENTIFIER_ATTEMPTS": "4",
        "COREASON_XCODEPROJ_LOG_LEVEL": "DEBUG",
    }
    with patch.dict("os.environ", env, clear=True):
        config = ProjectConfig()
    assert config.identifier_strategy == "deterministic"
    assert config.identifier_namespace == "MyApp"
    assert config.max_identifier_attempts == 4
    assert config.log_level == "DEBUG"


def test_config_ignores_unrelated_environment() -> None:
    with patch.dict("os.environ", {"COREASON_XCODEPROJ_UNKNOWN": "x", "IDENTIFIER_STRATEGY": "deterministic"}):
        config = ProjectConfig()
    assert config.identifier_strategy == "random"


def test_config_rejects_unknown_strategy() -> None:
    with pytest.raises(ValidationError) as excinfo:
        ProjectConfig(identifier_strategy="sequential")  # type: ignore[arg-type]
    assert "identifier_strategy" in str(excinfo.value)
