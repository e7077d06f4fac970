"""Flatten raw synonym and entity definitions into read-only lookup tables."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Tuple

from .providers import EntityValueProvider

SynonymTable = Mapping[str, Tuple[str, ...]]
EntityProviderTable = Mapping[str, EntityValueProvider]

_EMPTY_SYNONYMS: SynonymTable = MappingProxyType({})


class DataNormalizer:
    """Builds the synonym and entity provider tables once, at construction."""

    def __init__(
        self,
        synonyms: Any = None,
        entities: Any = None,
        *,
        use_synonyms_in_entity_value_provider: bool = False,
    ) -> None:
        self.synonyms: SynonymTable = build_synonym_table(synonyms)
        injected = self.synonyms if use_synonyms_in_entity_value_provider else _EMPTY_SYNONYMS
        self.entities: EntityProviderTable = build_entity_providers(entities, injected)


def build_synonym_table(raw: Any) -> SynonymTable:
    """Map each entity to the ``value`` of its synonym records, keeping order and duplicates."""

    if not isinstance(raw, Mapping):
        return _EMPTY_SYNONYMS
    table = {}
    for name, definition in raw.items():
        records = definition.get("data") if isinstance(definition, Mapping) else None
        if not isinstance(records, (list, tuple)):
            records = []
        table[str(name)] = tuple(
            record["value"] for record in records if isinstance(record, Mapping) and isinstance(record.get("value"), str)
        )
    return MappingProxyType(table)


def build_entity_providers(raw: Any, synonyms: SynonymTable) -> EntityProviderTable:
    if not isinstance(raw, Mapping):
        return MappingProxyType({})
    return MappingProxyType(
        {str(name): EntityValueProvider(definition, synonyms) for name, definition in raw.items()}
    )
