"""Data models shared across the CLI, augmentation core, and storage layers."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional, Tuple, Union


def _freeze(mapping: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(copy.deepcopy(dict(mapping or {})))


@dataclass(frozen=True, slots=True)
class TextPart:
    """Literal text fragment of a sentence."""

    value: str


@dataclass(frozen=True, slots=True)
class SynonymPart:
    """Placeholder resolved to one of the synonym values of an entity."""

    value: str
    optional: bool = False


@dataclass(frozen=True, slots=True)
class ReferencePart:
    """Any other part kind (entity slots and the like), carried through untouched."""

    type: str
    value: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze(self.attributes))


Part = Union[TextPart, SynonymPart, ReferencePart]
Sentence = Tuple[Part, ...]


def is_synonym_part(part: Part) -> bool:
    return isinstance(part, SynonymPart)


@dataclass(frozen=True, slots=True)
class Intent:
    """Named group of training sentences plus pass-through fields."""

    name: str
    data: Tuple[Sentence, ...] = ()
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(tuple(sentence) for sentence in self.data))
        object.__setattr__(self, "fields", _freeze(self.fields))


ExpansionEventKind = Literal["empty_domain", "truncated"]


@dataclass(slots=True)
class ExpansionEvent:
    """Diagnostic emitted when a sentence loses variants during expansion."""

    kind: ExpansionEventKind
    sentence: str
    entity: Optional[str] = None
    intent: Optional[str] = None
    detail: Optional[str] = None


@dataclass(slots=True)
class GlobalSettings:
    encoding: str = "utf-8"
    output_format: Literal["json", "parquet"] = "json"


@dataclass(slots=True)
class ProfileSettings:
    """Expansion behaviour selected by a named configuration profile."""

    description: str
    use_synonyms_in_entity_value_provider: bool = False
    max_variants_per_sentence: Optional[int] = None


@dataclass(slots=True)
class RuntimeConfig:
    global_settings: GlobalSettings
    profile: ProfileSettings
