# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class ProjectConfig(BaseSettings):
    """
    Configuration for a project object graph.
    """

    identifier_strategy: Literal["random", "deterministic"] = "random"
    identifier_namespace: str = "coreason-xcodeproj"
    max_identifier_attempts: int = 16

    log_level: str = "INFO"
    log_dir: str = "logs"

    model_config = SettingsConfigDict(
        env_prefix="COREASON_XCODEPROJ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
