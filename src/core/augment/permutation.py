"""Synonym permutation engine: expands placeholders into concrete sentence variants.

Each sentence goes through the same sequence of stages, exposed as plain
functions so they can be exercised on their own:

    partition_parts -> build_domains -> enumerate_combinations
        -> substitute -> normalize_whitespace
"""
from __future__ import annotations

import itertools
import math
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from common.models import (
    ExpansionEvent,
    Part,
    ReferencePart,
    Sentence,
    SynonymPart,
    TextPart,
    is_synonym_part,
)
from common.text import sentence_text

SynonymLookup = Callable[[str], Sequence[str]]
EventHook = Callable[[ExpansionEvent], None]

OMITTED = ""


def partition_parts(sentence: Sentence) -> Tuple[List[SynonymPart], List[Part]]:
    """Split parts into synonym placeholders and everything else, both in sentence order."""

    synonyms: List[SynonymPart] = []
    others: List[Part] = []
    for part in sentence:
        if is_synonym_part(part):
            synonyms.append(part)
        else:
            others.append(part)
    return synonyms, others


def build_domains(parts: Sequence[SynonymPart], lookup_synonyms: SynonymLookup) -> List[Tuple[str, ...]]:
    """One domain per placeholder occurrence.

    Repeated references to the same entity get their own slot. Optional
    placeholders add the omission value after the entity values.
    """

    domains = []
    for part in parts:
        values = tuple(lookup_synonyms(part.value))
        domains.append(values + (OMITTED,) if part.optional else values)
    return domains


def enumerate_combinations(domains: Sequence[Sequence[str]]) -> Iterator[Tuple[str, ...]]:
    """Cartesian product in odometer order: the last domain cycles fastest."""

    return itertools.product(*domains)


def substitute(sentence: Sentence, combination: Sequence[str]) -> List[Part]:
    values = iter(combination)
    parts: List[Part] = []
    for part in sentence:
        if isinstance(part, SynonymPart):
            value = next(values)
            if value != OMITTED:
                parts.append(TextPart(value))
        elif isinstance(part, TextPart):
            parts.append(TextPart(part.value))
        elif isinstance(part, ReferencePart):
            parts.append(part)
        else:
            raise TypeError(f"Unsupported sentence part: {part!r}")
    return parts


def normalize_whitespace(parts: Sequence[Part]) -> Sentence:
    """Trim the outer edges and the seams left behind by omitted placeholders.

    The first text is left-trimmed, the last text is right-trimmed, and any
    text followed by any part starting with a space is right-trimmed too. Texts
    that end up empty are dropped. Reference parts are kept as they are.
    """

    normalized: List[Part] = []
    last = len(parts) - 1
    for index, part in enumerate(parts):
        if not isinstance(part, TextPart):
            normalized.append(part)
            continue
        value = part.value
        if index == 0:
            value = value.lstrip()
        if index == last or _starts_with_space(parts[index + 1]):
            value = value.rstrip()
        if value:
            normalized.append(TextPart(value) if value != part.value else part)
    return tuple(normalized)


def count_variants(sentence: Sentence, lookup_synonyms: SynonymLookup) -> int:
    synonyms, _ = partition_parts(sentence)
    if not synonyms:
        return 1
    return math.prod(len(domain) for domain in build_domains(synonyms, lookup_synonyms))


def _starts_with_space(part: Part) -> bool:
    return part.value.startswith(" ")


class PermutationEngine:
    """Expands every synonym placeholder of a sentence into concrete variants.

    The number of variants is the product of the domain sizes, so it grows
    multiplicatively with the number of placeholders in a sentence. Pass
    ``max_variants`` to keep only the first variants in enumeration order.

    A required placeholder whose entity has no synonyms has an empty domain,
    which makes the whole sentence produce no variants. That outcome is
    reported through ``on_event`` as an ``empty_domain`` event.
    """

    def __init__(self, *, max_variants: Optional[int] = None, on_event: Optional[EventHook] = None) -> None:
        if max_variants is not None and max_variants <= 0:
            raise ValueError("max_variants must be greater than zero")
        self.max_variants = max_variants
        self.on_event = on_event

    def expand(
        self,
        sentence: Sentence,
        lookup_synonyms: SynonymLookup,
        *,
        intent: Optional[str] = None,
    ) -> List[Sentence]:
        synonyms, _ = partition_parts(sentence)
        if not synonyms:
            return [sentence]

        domains = build_domains(synonyms, lookup_synonyms)
        for part, domain in zip(synonyms, domains):
            if not domain:
                self._emit(
                    ExpansionEvent(
                        kind="empty_domain",
                        sentence=sentence_text(sentence),
                        entity=part.value,
                        intent=intent,
                        detail="required synonym has no values; sentence dropped",
                    )
                )

        combinations = enumerate_combinations(domains)
        if self.max_variants is not None:
            total = math.prod(len(domain) for domain in domains)
            if total > self.max_variants:
                self._emit(
                    ExpansionEvent(
                        kind="truncated",
                        sentence=sentence_text(sentence),
                        intent=intent,
                        detail=f"kept {self.max_variants} of {total} variants",
                    )
                )
                combinations = itertools.islice(combinations, self.max_variants)

        return [normalize_whitespace(substitute(sentence, combination)) for combination in combinations]

    def _emit(self, event: ExpansionEvent) -> None:
        if self.on_event:
            self.on_event(event)
