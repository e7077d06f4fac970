"""Entity value providers handed out by the augmentation facade."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple

from common.errors import BackendError, ErrorCode


class EntityValueProvider:
    """Round-robin source of concrete values for one entity.

    Values follow the order of the entity definition records. When the injected
    synonym table has an entry for a value, its synonyms are listed right after
    it, so a provider built with an empty table only yields the raw values.
    """

    def __init__(
        self,
        definition: Optional[Mapping[str, Any]] = None,
        synonyms: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        definition = definition if isinstance(definition, Mapping) else {}
        synonyms = synonyms or {}
        props = definition.get("props")
        self.props: Mapping[str, Any] = MappingProxyType(dict(props) if isinstance(props, Mapping) else {})
        self._values = _collect_values(definition.get("data"), synonyms)
        self._variants: Dict[str, Tuple[str, ...]] = {}
        variants = definition.get("variants")
        if isinstance(variants, Mapping):
            for name, records in variants.items():
                self._variants[str(name)] = _collect_values(records, synonyms)
        self._cursors: Dict[Optional[str], int] = {}

    @property
    def variant_names(self) -> Tuple[str, ...]:
        return tuple(self._variants)

    def values(self, variant: Optional[str] = None) -> Tuple[str, ...]:
        if variant is None:
            return self._values
        try:
            return self._variants[variant]
        except KeyError as exc:
            raise BackendError(
                ErrorCode.NOT_FOUND,
                f"Entity has no variant named '{variant}'",
                context={"variant": variant},
            ) from exc

    def next(self, variant: Optional[str] = None) -> str:
        """Return the next value, wrapping around after the last one."""

        values = self.values(variant)
        if not values:
            raise BackendError(ErrorCode.SCHEMA_ERROR, "Entity has no values to provide")
        index = self._cursors.get(variant, -1) + 1
        if index >= len(values):
            index = 0
        self._cursors[variant] = index
        return values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)


def _collect_values(records: Any, synonyms: Mapping[str, Sequence[str]]) -> Tuple[str, ...]:
    if not isinstance(records, (list, tuple)):
        return ()
    values = []
    for record in records:
        if not isinstance(record, Mapping) or not isinstance(record.get("value"), str):
            continue
        value = record["value"]
        values.append(value)
        values.extend(synonyms.get(value, ()))
    return tuple(values)
