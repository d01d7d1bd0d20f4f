"""Splitting of the SnpEff EFF INFO field into individual effect entries.

ARCHITECTURE:
    EFF payload (str | list[str]) → raw entries → (name, subfields) → validate_effect

Each entry looks like ``NAME(f1|f2|...|f9)``. Entries that do not split cleanly, or
that fail validation, are logged and dropped; they never abort the record.
"""

import logging
import re
from collections.abc import Sequence
from typing import Any

from varianteffect.constants import (
    SNPEFF_EFFECT_METADATA_DELIMITER,
    SNPEFF_EFFECT_METADATA_SUBFIELD_DELIMITER,
)
from varianteffect.effects.validator import validate_effect
from varianteffect.models.effect import Effect, EffectParseResult, ParsedRecord, RejectedEntry
from varianteffect.models.variant import CandidateRecord

logger = logging.getLogger(__name__)

_ENTRY_SPLITTER = re.compile(SNPEFF_EFFECT_METADATA_DELIMITER)


def normalize_payload(value: Any) -> tuple[str, ...]:
    """Normalize a single-string or multi-string EFF value to a tuple of entries."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        for item in value:
            if not isinstance(item, str):
                raise ValueError(f"EFF entries must be strings, got {type(item).__name__}")
        return tuple(value)
    raise ValueError(f"EFF payload must be a string or a sequence of strings, got {type(value).__name__}")


def split_effect_entry(entry: str) -> tuple[str, list[str]] | None:
    """Split ``NAME(f1|...|fn)`` into the name and its subfields.

    Returns None unless the entry splits into exactly a name and a metadata blob.
    Empty trailing subfields are kept.
    """
    pieces = _ENTRY_SPLITTER.split(entry)

    # The closing parenthesis leaves an empty trailing piece behind
    while pieces and pieces[-1] == "":
        pieces.pop()

    if len(pieces) != 2:
        return None

    name, metadata = pieces
    return name, metadata.split(SNPEFF_EFFECT_METADATA_SUBFIELD_DELIMITER)


def parse_effect_entry(entry: str) -> EffectParseResult:
    """Split and validate one raw entry."""
    split = split_effect_entry(entry)
    if split is None:
        return EffectParseResult(raw=entry, parse_error="Malformed SnpEff effect field")

    name, metadata = split
    return validate_effect(name, metadata, raw=entry)


def parse_effects(record: CandidateRecord) -> ParsedRecord:
    """Parse every EFF entry of a candidate record.

    Args:
        record: The matched SnpEff record

    Returns:
        ParsedRecord with well-formed effects in input order and the rejected entries
    """
    locus = record.locus
    effects: list[Effect] = []
    rejections: list[RejectedEntry] = []

    for entry in record.effects:
        result = parse_effect_entry(entry)

        if result.is_well_formed:
            effects.append(result.effect)
        else:
            logger.warning(
                f"Skipping malformed SnpEff effect field at {locus}. "
                f"Error was: \"{result.parse_error}\". Field was: \"{entry}\""
            )
            rejections.append(RejectedEntry(locus=locus, raw=entry, reason=result.parse_error))

    return ParsedRecord(locus=locus, effects=tuple(effects), rejections=tuple(rejections))
