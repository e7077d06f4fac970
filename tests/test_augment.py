"""Tests for the public augmentation facade."""
from __future__ import annotations

import copy

import pytest

from common.diagnostics import DiagnosticCollector
from common.errors import EntityNotFoundError, ErrorCode
from common.models import GlobalSettings, ProfileSettings, RuntimeConfig
from core.augment import Augment, EntityValueProvider


def _render(sentence: list) -> str:
    return "".join(part["value"] for part in sentence)


GREET = {
    "intents": {
        "greet": {
            "props": {"lang": "en"},
            "data": [
                [
                    {"type": "text", "value": "Hello "},
                    {"type": "synonym", "value": "name", "optional": True},
                    {"type": "text", "value": " there"},
                ]
            ],
        }
    },
    "entities": {"city": {"data": [{"type": "text", "value": "paris"}]}},
    "synonyms": {"name": {"data": [{"value": "Alice"}, {"value": "Bob"}]}},
}


def test_optional_synonym_expands_to_all_names_then_omission() -> None:
    intents = Augment(GREET).get_intents()
    data = intents["greet"]["data"]
    assert [_render(sentence) for sentence in data] == ["Hello Alice there", "Hello Bob there", "Hello there"]
    assert all(part["type"] == "text" for sentence in data for part in sentence)


def test_pass_through_fields_are_preserved() -> None:
    intents = Augment(GREET).get_intents()
    assert intents["greet"]["props"] == {"lang": "en"}


def test_get_intents_is_idempotent_and_leaves_input_untouched() -> None:
    original = copy.deepcopy(GREET)
    augment = Augment(GREET)
    assert augment.get_intents() == augment.get_intents()
    assert GREET == original


def test_sentences_are_concatenated_in_order() -> None:
    parsed = {
        "intents": {
            "order": {
                "data": [
                    [{"type": "text", "value": "one "}, {"type": "synonym", "value": "n"}],
                    [{"type": "text", "value": "plain"}],
                ]
            }
        },
        "synonyms": {"n": {"data": [{"value": "a"}, {"value": "b"}]}},
    }
    data = Augment(parsed).get_intents()["order"]["data"]
    assert [_render(sentence) for sentence in data] == ["one a", "one b", "plain"]


def test_entity_parts_are_kept_in_output() -> None:
    parsed = {
        "intents": {
            "book": {
                "data": [
                    [
                        {"type": "text", "value": "Book "},
                        {"type": "entity", "value": "city", "variant": None},
                    ]
                ]
            }
        }
    }
    data = Augment(parsed).get_intents()["book"]["data"]
    assert data == [[{"type": "text", "value": "Book "}, {"type": "entity", "value": "city", "variant": None}]]


def test_required_synonym_without_values_removes_sentence() -> None:
    parsed = {
        "intents": {
            "travel": {
                "data": [
                    [{"type": "text", "value": "Go to "}, {"type": "synonym", "value": "place"}],
                    [{"type": "text", "value": "Stay home"}],
                ]
            }
        }
    }
    collector = DiagnosticCollector()
    data = Augment(parsed, on_event=collector).get_intents()["travel"]["data"]
    assert [_render(sentence) for sentence in data] == ["Stay home"]
    assert collector.count("empty_domain") == 1
    assert collector.events[0].intent == "travel"


def test_get_entity_returns_same_provider() -> None:
    augment = Augment(GREET)
    provider = augment.get_entity("city")
    assert isinstance(provider, EntityValueProvider)
    assert augment.get_entity("city") is provider


def test_get_entity_unknown_raises_not_found() -> None:
    augment = Augment(GREET)
    with pytest.raises(EntityNotFoundError) as exc:
        augment.get_entity("unknown")
    assert exc.value.code == ErrorCode.NOT_FOUND
    assert "Could not find an entity with the name: unknown" in str(exc.value)
    assert isinstance(exc.value, KeyError)


def test_get_synonyms_defaults_to_empty() -> None:
    augment = Augment(GREET)
    assert augment.get_synonyms("name") == ("Alice", "Bob")
    assert augment.get_synonyms("city") == ()


def test_missing_sections_default_to_empty() -> None:
    augment = Augment({})
    assert augment.get_intents() == {}
    assert augment.entity_names == ()
    assert augment.synonym_names == ()
    assert Augment(None).get_intents() == {}


def test_provider_synonyms_flag() -> None:
    parsed = {
        "entities": {"city": {"data": [{"value": "new york"}]}},
        "synonyms": {"new york": {"data": [{"value": "nyc"}]}},
    }
    assert Augment(parsed).get_entity("city").values() == ("new york",)
    assert Augment(parsed, True).get_entity("city").values() == ("new york", "nyc")


def test_from_config_applies_profile() -> None:
    runtime = RuntimeConfig(
        global_settings=GlobalSettings(),
        profile=ProfileSettings(
            description="tmp",
            use_synonyms_in_entity_value_provider=False,
            max_variants_per_sentence=2,
        ),
    )
    data = Augment.from_config(GREET, runtime).get_intents()["greet"]["data"]
    assert [_render(sentence) for sentence in data] == ["Hello Alice there", "Hello Bob there"]


def test_expand_intents_returns_typed_intents() -> None:
    intents = Augment(GREET).expand_intents()
    greet = intents["greet"]
    assert greet.name == "greet"
    assert len(greet.data) == 3
    assert greet.fields["props"] == {"lang": "en"}


def test_mutating_a_result_does_not_leak_into_later_results() -> None:
    augment = Augment(GREET)
    first = augment.get_intents()
    first["greet"]["props"]["lang"] = "fr"
    assert augment.get_intents()["greet"]["props"] == {"lang": "en"}


def test_mutating_the_input_after_construction_has_no_effect() -> None:
    parsed = copy.deepcopy(GREET)
    parsed["intents"]["book"] = {
        "data": [[{"type": "entity", "value": "city", "variant": {"name": "short"}}]]
    }
    augment = Augment(parsed)
    parsed["intents"]["greet"]["props"]["lang"] = "de"
    parsed["intents"]["book"]["data"][0][0]["variant"]["name"] = "long"

    intents = augment.get_intents()
    assert intents["greet"]["props"] == {"lang": "en"}
    assert intents["book"]["data"][0][0]["variant"] == {"name": "short"}


def test_null_values_are_not_rendered_as_text() -> None:
    parsed = {
        "intents": {
            "ask": {
                "data": [
                    [
                        {"type": "text", "value": None},
                        {"type": "text", "value": "Where is "},
                        {"type": "synonym", "value": "n"},
                    ]
                ]
            }
        },
        "entities": {"city": {"data": [{"value": None}, {"value": "paris"}]}},
        "synonyms": {"n": {"data": [{"value": None}, {"value": "Bob"}]}},
    }
    augment = Augment(parsed)
    assert augment.get_synonyms("n") == ("Bob",)
    assert augment.get_entity("city").values() == ("paris",)
    data = augment.get_intents()["ask"]["data"]
    assert [_render(sentence) for sentence in data] == ["Where is Bob"]
