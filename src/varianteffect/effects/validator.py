"""Validation of one SnpEff effect entry into a typed Effect.

The metadata grammar depends on how many subfields SnpEff wrote:

- 9 fields: a clean effect, extracted by fixed position
- 10 fields: SnpEff appended a single warning or error in the last field
- 11 fields: SnpEff appended a warning (second-to-last) and an error (last)

Anything else is malformed. Validation keeps going after the first problem so that
an unknown effect name does not hide a structural error, but only the first
recorded problem is reported.
"""

from collections.abc import Sequence

from varianteffect.constants import (
    AMINO_ACID_CHANGE_FIELD_INDEX,
    CODING_FIELD_INDEX,
    CODON_CHANGE_FIELD_INDEX,
    EXON_ID_FIELD_INDEX,
    EXPECTED_NUMBER_OF_METADATA_FIELDS,
    FUNCTIONAL_CLASS_FIELD_INDEX,
    GENE_BIOTYPE_FIELD_INDEX,
    GENE_NAME_FIELD_INDEX,
    IMPACT_FIELD_INDEX,
    NUMBER_OF_METADATA_FIELDS_UPON_BOTH_WARNING_AND_ERROR,
    NUMBER_OF_METADATA_FIELDS_UPON_EITHER_WARNING_OR_ERROR,
    SNPEFF_EFFECT_METADATA_SUBFIELD_DELIMITER,
    SNPEFF_ERROR_FIELD_UPON_BOTH_WARNING_AND_ERROR,
    SNPEFF_WARNING_FIELD_UPON_BOTH_WARNING_AND_ERROR,
    SNPEFF_WARNING_OR_ERROR_FIELD_UPON_SINGLE_ERROR,
    TRANSCRIPT_ID_FIELD_INDEX,
)
from varianteffect.models.effect import Effect, EffectParseResult
from varianteffect.models.vocabulary import (
    EffectCoding,
    EffectFunctionalClass,
    EffectImpact,
    EffectType,
    ParseFailure,
    SnpEffVocabulary,
)


def validate_effect(name: str, metadata: Sequence[str], raw: str | None = None) -> EffectParseResult:
    """Validate an effect name and its metadata subfields.

    Args:
        name: Effect name token (text before the opening parenthesis)
        metadata: Pipe-separated subfields, empty trailing fields included
        raw: Original entry text, used for reporting. Rebuilt from name and
            metadata when not given.

    Returns:
        An EffectParseResult holding either the Effect or the first error message
    """
    if raw is None:
        raw = f"{name}({SNPEFF_EFFECT_METADATA_SUBFIELD_DELIMITER.join(metadata)})"

    errors: list[str] = []

    effect_type = EffectType.parse(name)
    if isinstance(effect_type, ParseFailure):
        errors.append(f"{name} is not a recognized effect type")

    field_count = len(metadata)
    if field_count != EXPECTED_NUMBER_OF_METADATA_FIELDS:
        if field_count == NUMBER_OF_METADATA_FIELDS_UPON_EITHER_WARNING_OR_ERROR:
            errors.append(
                "SnpEff issued the following warning or error: "
                f'"{metadata[SNPEFF_WARNING_OR_ERROR_FIELD_UPON_SINGLE_ERROR]}"'
            )
        elif field_count == NUMBER_OF_METADATA_FIELDS_UPON_BOTH_WARNING_AND_ERROR:
            errors.append(
                f'SnpEff issued the following warning: "{metadata[SNPEFF_WARNING_FIELD_UPON_BOTH_WARNING_AND_ERROR]}", '
                f'and the following error: "{metadata[SNPEFF_ERROR_FIELD_UPON_BOTH_WARNING_AND_ERROR]}"'
            )
        else:
            errors.append(
                "Wrong number of effect metadata fields. "
                f"Expected {EXPECTED_NUMBER_OF_METADATA_FIELDS} but found {field_count}"
            )
        return EffectParseResult(raw=raw, parse_error=errors[0])

    # The impact field is never empty in SnpEff output
    impact = EffectImpact.parse(metadata[IMPACT_FIELD_INDEX])
    if isinstance(impact, ParseFailure):
        errors.append(impact.message)

    functional_class = _parse_optional(
        EffectFunctionalClass, metadata[FUNCTIONAL_CLASS_FIELD_INDEX], EffectFunctionalClass.NONE, errors
    )
    coding = _parse_optional(EffectCoding, metadata[CODING_FIELD_INDEX], EffectCoding.UNKNOWN, errors)

    if errors:
        return EffectParseResult(raw=raw, parse_error=errors[0])

    effect = Effect(
        effect_type=effect_type,
        impact=impact,
        functional_class=functional_class,
        codon_change=metadata[CODON_CHANGE_FIELD_INDEX],
        amino_acid_change=metadata[AMINO_ACID_CHANGE_FIELD_INDEX],
        gene_name=metadata[GENE_NAME_FIELD_INDEX],
        gene_biotype=metadata[GENE_BIOTYPE_FIELD_INDEX],
        coding=coding,
        transcript_id=metadata[TRANSCRIPT_ID_FIELD_INDEX],
        exon_id=metadata[EXON_ID_FIELD_INDEX],
    )
    return EffectParseResult(raw=raw, effect=effect)


def _parse_optional(
    vocabulary: type[SnpEffVocabulary],
    token: str,
    default: SnpEffVocabulary,
    errors: list[str],
) -> SnpEffVocabulary | None:
    """Parse a subfield SnpEff may leave blank. Blank means ``default``, not an error."""
    if not token.strip():
        return default

    parsed = vocabulary.parse(token)
    if isinstance(parsed, ParseFailure):
        errors.append(parsed.message)
        return None
    return parsed
