"""Conversion of the selected Effect into SNPEFF_* INFO annotations."""

from enum import Enum

from varianteffect.constants import (
    AMINO_ACID_CHANGE_FIELD_INDEX,
    CODON_CHANGE_FIELD_INDEX,
    EXON_ID_FIELD_INDEX,
    FUNCTIONAL_CLASS_FIELD_INDEX,
    GENE_BIOTYPE_FIELD_INDEX,
    GENE_NAME_FIELD_INDEX,
    IMPACT_FIELD_INDEX,
    TRANSCRIPT_ID_FIELD_INDEX,
)
from varianteffect.models.effect import Effect
from varianteffect.models.header import InfoFieldDescription
from varianteffect.models.vocabulary import EffectFunctionalClass, EffectImpact


def _member_list(vocabulary: type[Enum]) -> str:
    return "[" + ", ".join(member.name for member in vocabulary) + "]"


class InfoFieldKey(Enum):
    """Output keys, in emission order.

    Each key carries the index of its value within the EFF metadata subfields
    (-1 for the effect name, which precedes the metadata) and its header description.
    """

    EFFECT_KEY = (
        "SNPEFF_EFFECT",
        -1,
        "The highest-impact effect resulting from the current variant "
        "(or one of the highest-impact effects, if there is a tie)",
    )
    IMPACT_KEY = (
        "SNPEFF_IMPACT",
        IMPACT_FIELD_INDEX,
        "Impact of the highest-impact effect resulting from the current variant " + _member_list(EffectImpact),
    )
    FUNCTIONAL_CLASS_KEY = (
        "SNPEFF_FUNCTIONAL_CLASS",
        FUNCTIONAL_CLASS_FIELD_INDEX,
        "Functional class of the highest-impact effect resulting from the current variant: "
        + _member_list(EffectFunctionalClass),
    )
    CODON_CHANGE_KEY = (
        "SNPEFF_CODON_CHANGE",
        CODON_CHANGE_FIELD_INDEX,
        "Old/New codon for the highest-impact effect resulting from the current variant",
    )
    AMINO_ACID_CHANGE_KEY = (
        "SNPEFF_AMINO_ACID_CHANGE",
        AMINO_ACID_CHANGE_FIELD_INDEX,
        "Old/New amino acid for the highest-impact effect resulting from the current variant (in HGVS style)",
    )
    GENE_NAME_KEY = (
        "SNPEFF_GENE_NAME",
        GENE_NAME_FIELD_INDEX,
        "Gene name for the highest-impact effect resulting from the current variant",
    )
    GENE_BIOTYPE_KEY = (
        "SNPEFF_GENE_BIOTYPE",
        GENE_BIOTYPE_FIELD_INDEX,
        "Gene biotype for the highest-impact effect resulting from the current variant",
    )
    TRANSCRIPT_ID_KEY = (
        "SNPEFF_TRANSCRIPT_ID",
        TRANSCRIPT_ID_FIELD_INDEX,
        "Transcript ID for the highest-impact effect resulting from the current variant",
    )
    EXON_ID_KEY = (
        "SNPEFF_EXON_ID",
        EXON_ID_FIELD_INDEX,
        "Exon ID for the highest-impact effect resulting from the current variant",
    )

    def __init__(self, key_name: str, field_index: int, description: str):
        self.key_name = key_name
        self.field_index = field_index
        self.description = description


def key_names() -> list[str]:
    """Names of every key this annotator may emit, in emission order."""
    return [key.key_name for key in InfoFieldKey]


def info_field_descriptions() -> list[InfoFieldDescription]:
    """Header declarations for every key, whether or not a run populates it."""
    return [InfoFieldDescription(id=key.key_name, description=key.description) for key in InfoFieldKey]


def effect_annotations(effect: Effect) -> dict[str, str]:
    """Annotations for one effect. Empty values are left out; coding status never appears."""
    values = {
        InfoFieldKey.EFFECT_KEY: effect.effect_type.value,
        InfoFieldKey.IMPACT_KEY: effect.impact.value,
        InfoFieldKey.FUNCTIONAL_CLASS_KEY: effect.functional_class.value,
        InfoFieldKey.CODON_CHANGE_KEY: effect.codon_change,
        InfoFieldKey.AMINO_ACID_CHANGE_KEY: effect.amino_acid_change,
        InfoFieldKey.GENE_NAME_KEY: effect.gene_name,
        InfoFieldKey.GENE_BIOTYPE_KEY: effect.gene_biotype,
        InfoFieldKey.TRANSCRIPT_ID_KEY: effect.transcript_id,
        InfoFieldKey.EXON_ID_KEY: effect.exon_id,
    }

    annotations: dict[str, str] = {}
    for key in InfoFieldKey:
        value = values[key]
        # Only keys with non-empty values
        if value is not None and value.strip():
            annotations[key.key_name] = value

    return annotations
