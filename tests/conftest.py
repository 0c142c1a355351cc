from typing import Callable

import pytest

from coreason_xcodeproj.config import ProjectConfig
from coreason_xcodeproj.models import FileReference
from coreason_xcodeproj.registry import ObjectRegistry


@pytest.fixture
def registry() -> ObjectRegistry:
    return ObjectRegistry(ProjectConfig())


@pytest.fixture
def deterministic_registry() -> ObjectRegistry:
    return ObjectRegistry(ProjectConfig(identifier_strategy="deterministic", identifier_namespace="tests"))


@pytest.fixture
def make_file(registry: ObjectRegistry) -> Callable[..., FileReference]:
    """Registers a FileReference in the ``registry`` fixture."""

    def _make(name: str | None = None, path: str | None = None) -> FileReference:
        ref = FileReference(name=name, path=path)
        registry.add_object(ref)
        return ref

    return _make
