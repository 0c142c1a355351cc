# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

"""Entities of the project object graph."""

from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from coreason_xcodeproj.exceptions import DanglingReferenceError, UnboundObjectError, UnknownObjectError
from coreason_xcodeproj.identifiers import ObjectId
from coreason_xcodeproj.utils.logger import logger

if TYPE_CHECKING:
    from coreason_xcodeproj.registry import ObjectRegistry

COMPILER_FLAGS = "COMPILER_FLAGS"
NO_ARC_COMPILER_FLAG = "-fno-objc-arc"


class PBXObject(BaseModel):
    """Base class of every object that can live in an ObjectRegistry.

    Attributes:
        isa: The object kind as written in the project file.
        identifier: Set by the registry when the object is added; None before.
    """

    model_config = ConfigDict(populate_by_name=True)

    isa: str
    identifier: ObjectId | None = Field(default=None, exclude=True)

    _registry: "ObjectRegistry | None" = PrivateAttr(default=None)

    @property
    def registry(self) -> "ObjectRegistry":
        """The registry this object was added to.

        Raises:
            UnboundObjectError: If the object was never registered.
        """
        if self._registry is None:
            raise UnboundObjectError(f"{self.isa} is not attached to a registry")
        return self._registry

    @property
    def is_registered(self) -> bool:
        return self._registry is not None

    def attach(self, identifier: ObjectId, registry: "ObjectRegistry") -> None:
        self.identifier = identifier
        self._registry = registry

    def detach(self) -> None:
        self.identifier = None
        self._registry = None

    def to_properties(self) -> dict[str, Any]:
        """Returns the key/value pairs a project file writer emits for this object."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FileReference(PBXObject):
    """A file known to the project.

    At least one of ``name`` and ``path`` must be given. Lookups identify a
    reference by its name, falling back to its path.
    """

    isa: Literal["PBXFileReference"] = "PBXFileReference"
    name: str | None = None
    path: str | None = None
    source_tree: str = Field(default="<group>", alias="sourceTree")
    last_known_file_type: str | None = Field(default=None, alias="lastKnownFileType")

    @model_validator(mode="after")
    def _require_name_or_path(self) -> "FileReference":
        if self.name is None and self.path is None:
            raise ValueError("FileReference requires a name or a path")
        return self

    def matches(self, query: str) -> bool:
        return self.name == query or self.path == query


def identity_key(file_ref: FileReference) -> str:
    """Returns the key a file reference is looked up by: its name, else its path."""
    if file_ref.name is not None:
        return file_ref.name
    return file_ref.path  # type: ignore[return-value]


class BuildFile(PBXObject):
    """Joins a FileReference to the build phase whose ``files`` list holds it.

    Attributes:
        file_ref: Identifier of the referenced FileReference.
        settings: Per-file build settings, e.g. compiler flags.
    """

    isa: Literal["PBXBuildFile"] = "PBXBuildFile"
    file_ref: ObjectId = Field(alias="fileRef")
    settings: dict[str, str] | None = None

    @classmethod
    def buildfile(cls, file_ref: ObjectId) -> "BuildFile":
        return cls(file_ref=file_ref)

    @classmethod
    def buildfile_without_arc(cls, file_ref: ObjectId) -> "BuildFile":
        """Returns a build file compiled with automatic reference counting disabled."""
        return cls(file_ref=file_ref, settings={COMPILER_FLAGS: NO_ARC_COMPILER_FLAG})

    def file_reference(self) -> FileReference:
        """Resolves ``file_ref`` through the registry.

        Raises:
            DanglingReferenceError: If ``file_ref`` is unknown or not a FileReference.
            UnboundObjectError: If this build file is not registered.
        """
        try:
            target = self.registry.resolve(self.file_ref)
        except UnknownObjectError as e:
            logger.error(f"Build file {self.identifier} points at missing file reference {self.file_ref}")
            raise DanglingReferenceError(self.identifier, self.file_ref, "PBXFileReference") from e
        if not isinstance(target, FileReference):
            logger.error(f"Build file {self.identifier} points at {target.isa} {self.file_ref}")
            raise DanglingReferenceError(self.identifier, self.file_ref, "PBXFileReference")
        return target
