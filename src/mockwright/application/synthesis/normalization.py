"""Default capability normalization rules."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Collection, Iterable, Iterator

from mockwright.domain.model.normalization_rule import NormalizationRule

DEFAULT_RULES: tuple[NormalizationRule, ...] = (
    NormalizationRule(
        trigger=Iterable,
        refinements=(Iterator, Collection),
        replacement=Iterator,
    ),
    NormalizationRule(
        trigger=AsyncIterable,
        refinements=(AsyncIterator,),
        replacement=AsyncIterator,
    ),
)
