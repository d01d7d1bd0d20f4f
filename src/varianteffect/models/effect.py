"""Parsed SnpEff effect models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from varianteffect.models.variant import Locus
from varianteffect.models.vocabulary import (
    EffectCoding,
    EffectFunctionalClass,
    EffectImpact,
    EffectType,
)


class Effect(BaseModel):
    """One well-formed effect from a SnpEff EFF field.

    Type and impact are always resolved. Functional class and coding status are
    default-filled (NONE / UNKNOWN) when SnpEff left them blank. The free-text
    fields keep SnpEff's text as-is and may be empty.
    """

    model_config = ConfigDict(frozen=True)

    effect_type: EffectType
    impact: EffectImpact
    functional_class: EffectFunctionalClass = EffectFunctionalClass.NONE
    codon_change: str = ""
    amino_acid_change: str = ""
    gene_name: str = ""
    gene_biotype: str = ""
    coding: EffectCoding = EffectCoding.UNKNOWN
    transcript_id: str = ""
    exon_id: str = ""

    @property
    def is_coding(self) -> bool:
        return self.coding == EffectCoding.CODING


class EffectParseResult(BaseModel):
    """Outcome of validating one raw EFF entry: an Effect or its first parse error."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(..., description="The raw entry text, for reporting")
    effect: Effect | None = None
    parse_error: str | None = None

    @model_validator(mode="after")
    def check_exactly_one_outcome(self) -> "EffectParseResult":
        if (self.effect is None) == (self.parse_error is None):
            raise ValueError("A parse result holds either an effect or a parse error")
        return self

    @property
    def is_well_formed(self) -> bool:
        return self.effect is not None


class RejectedEntry(BaseModel):
    """An EFF entry that was dropped, with the reason it was dropped."""

    model_config = ConfigDict(frozen=True)

    locus: Locus
    raw: str
    reason: str


class ParsedRecord(BaseModel):
    """All entries of one candidate record, split into kept effects and rejections."""

    model_config = ConfigDict(frozen=True)

    locus: Locus
    effects: tuple[Effect, ...] = ()
    rejections: tuple[RejectedEntry, ...] = ()
