from __future__ import annotations

import pytest

from common.errors import BackendError, ErrorCode
from core.augment import EntityValueProvider

CITY = {
    "props": {"type": "location"},
    "data": [{"type": "text", "value": "paris"}, {"type": "text", "value": "new york"}],
    "variants": {"short": [{"type": "text", "value": "NY"}]},
}


def test_provider_lists_values_in_definition_order() -> None:
    provider = EntityValueProvider(CITY)
    assert provider.values() == ("paris", "new york")
    assert list(provider) == ["paris", "new york"]
    assert len(provider) == 2


def test_provider_inserts_synonyms_after_their_value() -> None:
    provider = EntityValueProvider(CITY, {"new york": ("nyc", "big apple")})
    assert provider.values() == ("paris", "new york", "nyc", "big apple")


def test_next_wraps_around() -> None:
    provider = EntityValueProvider(CITY)
    assert [provider.next() for _ in range(5)] == ["paris", "new york", "paris", "new york", "paris"]


def test_variants_have_independent_cursors() -> None:
    provider = EntityValueProvider(CITY)
    assert provider.variant_names == ("short",)
    assert provider.next() == "paris"
    assert provider.next("short") == "NY"
    assert provider.next() == "new york"


def test_unknown_variant_raises_not_found() -> None:
    provider = EntityValueProvider(CITY)
    with pytest.raises(BackendError) as exc:
        provider.values("long")
    assert exc.value.code == ErrorCode.NOT_FOUND


def test_empty_provider_cannot_serve_values() -> None:
    provider = EntityValueProvider({})
    assert provider.values() == ()
    with pytest.raises(BackendError) as exc:
        provider.next()
    assert exc.value.code == ErrorCode.SCHEMA_ERROR


def test_props_are_read_only() -> None:
    provider = EntityValueProvider(CITY)
    assert provider.props["type"] == "location"
    with pytest.raises(TypeError):
        provider.props["type"] = "other"  # type: ignore[index]
