"""Ordering of effects by biological significance.

Precedence, highest first:
1. An effect within a coding gene beats one that is not, whatever the impacts.
2. Higher impact severity (MODIFIER < LOW < MODERATE < HIGH).
3. Higher functional class priority (NONE < SILENT < MISSENSE < NONSENSE).
4. Otherwise the effect seen first is kept.
"""

from collections.abc import Iterable
from functools import cmp_to_key

from varianteffect.models.effect import Effect


def is_higher_impact_than(effect: Effect, other: Effect) -> bool:
    """True when ``effect`` strictly outranks ``other``."""
    if effect.is_coding and not other.is_coding:
        return True
    elif not effect.is_coding and other.is_coding:
        return False

    if effect.impact.is_higher_impact_than(other.impact):
        return True
    elif effect.impact.is_same_impact_as(other.impact):
        return effect.functional_class.is_higher_priority_than(other.functional_class)

    return False


def most_significant_effect(effects: Iterable[Effect]) -> Effect | None:
    """Return the most significant effect, or None when there are none."""
    most_significant = None

    for effect in effects:
        if most_significant is None or is_higher_impact_than(effect, most_significant):
            most_significant = effect

    return most_significant


def _compare(a: Effect, b: Effect) -> int:
    if is_higher_impact_than(a, b):
        return -1
    if is_higher_impact_than(b, a):
        return 1
    return 0


def rank_effects(effects: Iterable[Effect]) -> list[Effect]:
    """Effects ordered most significant first; ties keep their input order."""
    return sorted(effects, key=cmp_to_key(_compare))
