# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

"""Build phases of a native target.

A build phase is an ordered list of PBXBuildFile identifiers. The order is the
compile/link/copy order, so entries are only ever appended.

Example of a frameworks phase as it appears in a project file::

    7165D44D146B4EA100DE2F0E /* Frameworks */ = {
        isa = PBXFrameworksBuildPhase;
        buildActionMask = 2147483647;
        files = (
            7165D455146B4EA100DE2F0E /* UIKit.framework in Frameworks */,
            7165D457146B4EA100DE2F0E /* Foundation.framework in Frameworks */,
        );
        runOnlyForDeploymentPostprocessing = 0;
    };
"""

from typing import Callable, Literal

from pydantic import Field

from coreason_xcodeproj.exceptions import DanglingReferenceError, UnboundObjectError, UnknownObjectError
from coreason_xcodeproj.identifiers import ObjectId
from coreason_xcodeproj.models.objects import BuildFile, FileReference, PBXObject, identity_key
from coreason_xcodeproj.utils.logger import logger

BUILD_ACTION_MASK = "2147483647"
RUN_ONLY_FOR_DEPLOYMENT_POSTPROCESSING = "0"


class BuildPhase(PBXObject):
    """Base class of the frameworks, sources and resources build phases.

    Attributes:
        build_action_mask: Always ``2147483647``.
        files: Identifiers of the PBXBuildFile entries, in insertion order.
        run_only_for_deployment_postprocessing: Always ``0``.
    """

    build_action_mask: str = Field(default=BUILD_ACTION_MASK, alias="buildActionMask")
    files: list[ObjectId] = Field(default_factory=list)
    run_only_for_deployment_postprocessing: str = Field(
        default=RUN_ONLY_FOR_DEPLOYMENT_POSTPROCESSING, alias="runOnlyForDeploymentPostprocessing"
    )

    @staticmethod
    def framework() -> "FrameworksBuildPhase":
        """Returns a new, empty frameworks build phase."""
        return FrameworksBuildPhase()

    @staticmethod
    def sources() -> "SourcesBuildPhase":
        """Returns a new, empty sources build phase."""
        return SourcesBuildPhase()

    @staticmethod
    def resources() -> "ResourcesBuildPhase":
        """Returns a new, empty resources build phase."""
        return ResourcesBuildPhase()

    def build_file_entries(self) -> list[BuildFile]:
        """Returns the PBXBuildFile objects of this phase, in order.

        Raises:
            DanglingReferenceError: If an identifier in ``files`` does not resolve to a build file.
        """
        return [self._resolve_entry(identifier) for identifier in self.files]

    def build_files(self) -> list[FileReference]:
        """Returns the file references behind the build files, in order.

        Raises:
            DanglingReferenceError: If any entry or its file reference cannot be resolved.
        """
        return [entry.file_reference() for entry in self.build_file_entries()]

    def build_file(self, name: str) -> FileReference | None:
        """Finds the first file whose name or path equals ``name``.

        Args:
            name: The name or the path of the file.

        Returns:
            FileReference | None: The matching file reference, or None if no file matches.
        """
        found = self._find(name)
        return found[1] if found else None

    def build_file_entry(self, name: str) -> BuildFile | None:
        """Like build_file, but returns the PBXBuildFile joining the match to this phase."""
        found = self._find(name)
        return found[0] if found else None

    def add_build_file(self, file_ref: FileReference) -> BuildFile:
        """Adds a registered file reference to this phase unless it is already present.

        Args:
            file_ref: The file reference to add. It must already be registered.

        Returns:
            BuildFile: The entry now representing the file, new or pre-existing.
        """
        return self._add_build_file_with(file_ref, BuildFile.buildfile)

    def add_build_file_without_arc(self, file_ref: FileReference) -> BuildFile:
        """Adds a file compiled with ``-fno-objc-arc`` unless it is already present.

        An entry that already exists keeps its settings; the flag is only set
        when this call is the one that inserts the file.
        """
        return self._add_build_file_with(file_ref, BuildFile.buildfile_without_arc)

    def remove_build_file(self, file_ref: FileReference | str) -> bool:
        """Removes a file from this phase and drops its build file from the registry.

        Args:
            file_ref: The file reference, or the name/path to look up.

        Returns:
            bool: True if an entry was removed, False if the file was not present.
        """
        key = file_ref if isinstance(file_ref, str) else identity_key(file_ref)
        entry = self.build_file_entry(key)
        if entry is None:
            return False

        self.files.remove(entry.identifier)  # type: ignore[arg-type]
        self.registry.remove_object(entry.identifier)  # type: ignore[arg-type]
        logger.bind(phase=self.identifier).info(f"Removed {key} from {self.isa}")
        return True

    def _find(self, name: str) -> tuple[BuildFile, FileReference] | None:
        for entry in self.build_file_entries():
            file_ref = entry.file_reference()
            if file_ref.matches(name):
                return entry, file_ref
        return None

    def _resolve_entry(self, identifier: ObjectId) -> BuildFile:
        try:
            entry = self.registry.resolve(identifier)
        except UnknownObjectError as e:
            logger.error(f"{self.isa} {self.identifier} lists missing build file {identifier}")
            raise DanglingReferenceError(self.identifier, identifier, "PBXBuildFile") from e
        if not isinstance(entry, BuildFile):
            logger.error(f"{self.isa} {self.identifier} lists {entry.isa} {identifier} as a build file")
            raise DanglingReferenceError(self.identifier, identifier, "PBXBuildFile")
        return entry

    def _add_build_file_with(
        self, file_ref: FileReference, create: Callable[[ObjectId], BuildFile]
    ) -> BuildFile:
        key = identity_key(file_ref)
        existing = self.build_file_entry(key)
        if existing is not None:
            logger.debug(f"{key} already in {self.isa}, skipping")
            return existing

        if file_ref.identifier is None:
            raise UnboundObjectError(f"File reference {key} must be registered before it is added to a build phase")
        if file_ref.registry is not self.registry:
            raise UnboundObjectError(
                f"File reference {key} belongs to a different registry than {self.isa} {self.identifier}"
            )

        entry = create(file_ref.identifier)
        identifier = self.registry.add_object(entry)
        self.files.append(identifier)
        logger.bind(phase=self.identifier, build_file=identifier).info(f"Added {key} to {self.isa}")
        return entry


class FrameworksBuildPhase(BuildPhase):
    isa: Literal["PBXFrameworksBuildPhase"] = "PBXFrameworksBuildPhase"


class SourcesBuildPhase(BuildPhase):
    isa: Literal["PBXSourcesBuildPhase"] = "PBXSourcesBuildPhase"


class ResourcesBuildPhase(BuildPhase):
    isa: Literal["PBXResourcesBuildPhase"] = "PBXResourcesBuildPhase"


framework = BuildPhase.framework
sources = BuildPhase.sources
resources = BuildPhase.resources
