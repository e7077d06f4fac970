"""Conversion between parsed-data dictionaries and typed intent models."""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping

from .models import Intent, Part, ReferencePart, Sentence, SynonymPart, TextPart

TEXT_TYPE = "text"
SYNONYM_TYPE = "synonym"


def part_from_dict(data: Mapping[str, Any]) -> Part:
    kind = str(data.get("type") or TEXT_TYPE)
    value = data.get("value")
    value = "" if value is None else str(value)
    if kind == TEXT_TYPE:
        return TextPart(value=value)
    if kind == SYNONYM_TYPE:
        return SynonymPart(value=value, optional=bool(data.get("optional", False)))
    attributes = {key: item for key, item in data.items() if key not in {"type", "value"}}
    return ReferencePart(type=kind, value=value, attributes=attributes)


def part_to_dict(part: Part) -> Dict[str, Any]:
    if isinstance(part, TextPart):
        return {"type": TEXT_TYPE, "value": part.value}
    if isinstance(part, SynonymPart):
        return {"type": SYNONYM_TYPE, "value": part.value, "optional": part.optional}
    if isinstance(part, ReferencePart):
        return {"type": part.type, "value": part.value, **copy.deepcopy(dict(part.attributes))}
    raise TypeError(f"Unsupported sentence part: {part!r}")


def sentence_from_list(data: Any) -> Sentence:
    if not isinstance(data, list):
        return ()
    return tuple(part_from_dict(item) for item in data if isinstance(item, Mapping))


def sentence_to_list(sentence: Sentence) -> List[Dict[str, Any]]:
    return [part_to_dict(part) for part in sentence]


def intent_from_dict(name: str, data: Any) -> Intent:
    if not isinstance(data, Mapping):
        return Intent(name=name)
    sentences = data.get("data")
    if not isinstance(sentences, list):
        sentences = []
    fields = {key: value for key, value in data.items() if key != "data"}
    return Intent(
        name=name,
        data=tuple(sentence_from_list(item) for item in sentences),
        fields=fields,
    )


def intent_to_dict(intent: Intent) -> Dict[str, Any]:
    """Render an intent back to its parsed-data shape, pass-through fields first."""

    return {
        **copy.deepcopy(dict(intent.fields)),
        "data": [sentence_to_list(sentence) for sentence in intent.data],
    }


def parse_intents(raw: Any) -> Dict[str, Intent]:
    if not isinstance(raw, Mapping):
        return {}
    return {str(name): intent_from_dict(str(name), data) for name, data in raw.items()}
