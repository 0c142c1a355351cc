# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_xcodeproj

from typing import Any, Iterator

from coreason_xcodeproj.config import ProjectConfig
from coreason_xcodeproj.exceptions import UnknownObjectError
from coreason_xcodeproj.identifiers import IdentifierGenerator, ObjectId
from coreason_xcodeproj.models.objects import PBXObject
from coreason_xcodeproj.utils.logger import logger


class ObjectRegistry:
    """Owns every object of one project graph, keyed by identifier.

    The registry is the only place identifiers are minted. Objects refer to
    each other by identifier and resolve those through the registry.
    """

    def __init__(self, config: ProjectConfig | None = None):
        """Initializes an empty registry.

        Args:
            config: Optional configuration object. If not provided, defaults are used.
        """
        self.config = config or ProjectConfig()
        self.objects: dict[ObjectId, PBXObject] = {}
        self._generator = IdentifierGenerator(
            strategy=self.config.identifier_strategy,
            namespace=self.config.identifier_namespace,
        )

    def generate_identifier(self, key: str = "") -> ObjectId:
        """Returns an identifier not used by any live object.

        Raises:
            RuntimeError: If no free identifier was found within the configured attempts.
        """
        for _ in range(self.config.max_identifier_attempts):
            identifier = self._generator.next_id(key)
            if identifier not in self.objects:
                return identifier
            logger.warning(f"Identifier collision on {identifier}, retrying")
        raise RuntimeError(
            f"Could not mint a unique identifier after {self.config.max_identifier_attempts} attempts"
        )

    def add_object(self, obj: PBXObject) -> ObjectId:
        """Registers ``obj`` under a fresh identifier.

        The identifier is also stored on the object, and the object is bound to
        this registry so it can resolve its own references.

        Returns:
            ObjectId: The new identifier.

        Raises:
            ValueError: If the object is already registered.
        """
        if obj.identifier is not None:
            raise ValueError(f"{obj.isa} is already registered as {obj.identifier}")

        identifier = self.generate_identifier(obj.isa)
        self.objects[identifier] = obj
        obj.attach(identifier, self)
        logger.debug(f"Registered {obj.isa} {identifier}")
        return identifier

    def resolve(self, identifier: ObjectId) -> PBXObject:
        """Returns the live object for ``identifier``.

        Raises:
            UnknownObjectError: If no object is registered under ``identifier``.
        """
        try:
            return self.objects[identifier]
        except KeyError:
            raise UnknownObjectError(identifier) from None

    def get(self, identifier: ObjectId) -> PBXObject | None:
        return self.objects.get(identifier)

    def remove_object(self, identifier: ObjectId) -> PBXObject:
        """Drops an object from the registry. Objects still referring to it become dangling.

        Raises:
            UnknownObjectError: If no object is registered under ``identifier``.
        """
        obj = self.resolve(identifier)
        del self.objects[identifier]
        obj.detach()
        logger.debug(f"Removed {obj.isa} {identifier}")
        return obj

    def objects_by_isa(self, isa: str) -> list[PBXObject]:
        return [obj for obj in self.objects.values() if obj.isa == isa]

    def to_objects(self) -> dict[str, dict[str, Any]]:
        """Returns the ``objects`` section a project file writer emits, keyed by identifier."""
        return {identifier: obj.to_properties() for identifier, obj in self.objects.items()}

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.objects

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[ObjectId]:
        return iter(self.objects)
