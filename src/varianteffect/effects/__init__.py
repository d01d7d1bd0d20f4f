"""EFF parsing, validation, ranking and annotation."""

from varianteffect.effects.emitter import InfoFieldKey, effect_annotations, info_field_descriptions, key_names
from varianteffect.effects.matcher import find_matching_record
from varianteffect.effects.parser import normalize_payload, parse_effect_entry, parse_effects, split_effect_entry
from varianteffect.effects.ranking import is_higher_impact_than, most_significant_effect, rank_effects
from varianteffect.effects.validator import validate_effect

__all__ = [
    "InfoFieldKey",
    "effect_annotations",
    "info_field_descriptions",
    "key_names",
    "find_matching_record",
    "normalize_payload",
    "parse_effect_entry",
    "parse_effects",
    "split_effect_entry",
    "is_higher_impact_than",
    "most_significant_effect",
    "rank_effects",
    "validate_effect",
]
