"""Field type registry.

Maps the type name declared in a field definition to a factory building the
field type from that definition::

    registry = default_registry()
    field = registry.create(
        {"type": "taxonomy", "fieldname": "tags", "target": "taxonomy"}
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from row_taxonomy.core.exceptions import (
    DuplicateFieldTypeError,
    FieldConfigError,
    UnknownFieldTypeError,
)
from row_taxonomy.fields.protocol import FieldType
from row_taxonomy.fields.taxonomy import TaxonomyType

log = logging.getLogger(__name__)

FieldFactory = Callable[[dict[str, Any]], FieldType]


class FieldTypeRegistry:
    """Registry of field type factories keyed by declared type name."""

    def __init__(self) -> None:
        self._factories: dict[str, FieldFactory] = {}

    def register(self, type_name: str, factory: FieldFactory) -> None:
        """Register *factory* under *type_name*.

        Raises:
            DuplicateFieldTypeError: If the name is already taken.
        """
        if type_name in self._factories:
            raise DuplicateFieldTypeError(type_name)
        self._factories[type_name] = factory

    def create(self, definition: dict[str, Any]) -> FieldType:
        """Build the field type declared by *definition*.

        Raises:
            FieldConfigError: If the definition has no ``type``.
            UnknownFieldTypeError: If no factory is registered for it.
        """
        try:
            type_name = definition["type"]
        except KeyError:
            raise FieldConfigError(
                str(definition.get("fieldname", "<unnamed>")), "missing key 'type'"
            ) from None
        try:
            factory = self._factories[type_name]
        except KeyError:
            raise UnknownFieldTypeError(type_name) from None

        log.debug("Creating %s field %s", type_name, definition.get("fieldname"))
        return factory(definition)

    def create_all(self, definitions: list[dict[str, Any]]) -> list[FieldType]:
        return [self.create(definition) for definition in definitions]

    def has(self, type_name: str) -> bool:
        return type_name in self._factories

    @property
    def type_names(self) -> list[str]:
        """Registered type names, sorted alphabetically."""
        return sorted(self._factories)

    def __len__(self) -> int:
        return len(self._factories)


def default_registry() -> FieldTypeRegistry:
    """Registry with the built-in field types."""
    registry = FieldTypeRegistry()
    registry.register("taxonomy", TaxonomyType.from_mapping)
    return registry
