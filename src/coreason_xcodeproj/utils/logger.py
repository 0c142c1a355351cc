# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

import sys
from pathlib import Path

from loguru import logger

from coreason_xcodeproj.config import ProjectConfig

__all__ = ["logger"]

_config = ProjectConfig()

# Remove the default handler so records are not emitted twice
logger.remove()

log_path = Path(_config.log_dir)
log_path.mkdir(parents=True, exist_ok=True)

# Sink 1: human readable stderr
logger.add(
    sys.stderr,
    level=_config.log_level,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    ),
)

# Sink 2: JSON lines file
logger.add(
    log_path / "app.log",
    level=_config.log_level,
    rotation="500 MB",
    retention="10 days",
    serialize=True,
    enqueue=True,
)
