"""Public entry points for augmenting parsed training data."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from common.errors import EntityNotFoundError
from common.models import Intent, RuntimeConfig
from common.serialization import intent_to_dict, parse_intents

from .normalizer import DataNormalizer
from .permutation import EventHook, PermutationEngine
from .providers import EntityValueProvider


class Augment:
    """Augments a parsed data tree (intents, entities, synonyms).

    Synonym placeholders in intent sentences are replaced by every combination
    of their values, so adapters only ever see plain text parts.
    """

    def __init__(
        self,
        parsed_data: Optional[Mapping[str, Any]] = None,
        use_synonyms_in_entity_value_provider: bool = False,
        *,
        max_variants_per_sentence: Optional[int] = None,
        on_event: Optional[EventHook] = None,
    ) -> None:
        parsed_data = parsed_data if isinstance(parsed_data, Mapping) else {}
        self.intents: Mapping[str, Intent] = MappingProxyType(parse_intents(parsed_data.get("intents") or {}))
        self._normalizer = DataNormalizer(
            parsed_data.get("synonyms") or {},
            parsed_data.get("entities") or {},
            use_synonyms_in_entity_value_provider=use_synonyms_in_entity_value_provider,
        )
        self._engine = PermutationEngine(max_variants=max_variants_per_sentence, on_event=on_event)

    @classmethod
    def from_config(
        cls,
        parsed_data: Optional[Mapping[str, Any]],
        runtime_config: RuntimeConfig,
        *,
        on_event: Optional[EventHook] = None,
    ) -> "Augment":
        profile = runtime_config.profile
        return cls(
            parsed_data,
            profile.use_synonyms_in_entity_value_provider,
            max_variants_per_sentence=profile.max_variants_per_sentence,
            on_event=on_event,
        )

    @property
    def entity_names(self) -> Tuple[str, ...]:
        return tuple(self._normalizer.entities)

    @property
    def synonym_names(self) -> Tuple[str, ...]:
        return tuple(self._normalizer.synonyms)

    def get_entity(self, name: str) -> EntityValueProvider:
        """Retrieve the value provider of an entity, raising when it is unknown."""

        try:
            return self._normalizer.entities[name]
        except KeyError:
            raise EntityNotFoundError(name) from None

    def get_synonyms(self, entity: str) -> Tuple[str, ...]:
        return self._normalizer.synonyms.get(entity, ())

    def expand_intents(self) -> Dict[str, Intent]:
        expanded: Dict[str, Intent] = {}
        for name, intent in self.intents.items():
            data = []
            for sentence in intent.data:
                data.extend(self._engine.expand(sentence, self.get_synonyms, intent=name))
            expanded[name] = Intent(name=name, data=tuple(data), fields=intent.fields)
        return expanded

    def get_intents(self) -> Dict[str, Dict[str, Any]]:
        """Intents with every synonym placeholder replaced, in parsed-data shape."""

        return {name: intent_to_dict(intent) for name, intent in self.expand_intents().items()}
