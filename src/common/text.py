"""Lightweight text helpers shared across modules."""
from __future__ import annotations

from typing import Iterable

from .models import Part, Sentence


def part_text(part: Part) -> str:
    return part.value


def sentence_text(sentence: Sentence | Iterable[Part]) -> str:
    """Return the sentence as plain text by concatenating part values in order."""

    return "".join(part_text(part) for part in sentence)
