"""Variant and SnpEff candidate record models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Locus(BaseModel):
    """A genomic coordinate (1-based start position)."""

    model_config = ConfigDict(frozen=True)

    chrom: str
    pos: int = Field(..., ge=1)

    def __str__(self) -> str:
        return f"{self.chrom}:{self.pos}"


class VariantRecord(BaseModel):
    """A variant to be annotated."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "chrom": "1",
                "pos": 69270,
                "ref": "A",
                "alts": ["G"],
            }
        },
    )

    chrom: str = Field(..., description="Chromosome / contig name")
    pos: int = Field(..., ge=1, description="1-based start position")
    ref: str = Field(..., description="Reference allele")
    alts: tuple[str, ...] = Field(default=(), description="Alternate alleles, in file order")

    @property
    def locus(self) -> Locus:
        return Locus(chrom=self.chrom, pos=self.pos)

    def has_same_alleles_as(self, other: "VariantRecord") -> bool:
        """Reference identical and alternates equal, order included."""
        return self.ref == other.ref and self.alts == other.alts


class CandidateRecord(VariantRecord):
    """A record from the SnpEff output file, carrying the raw EFF payload.

    The VCF codec hands back a single string when there is one effect and a list
    when there are several. Both shapes are accepted here and normalized to a tuple
    of raw entry strings, so nothing downstream sees the ambiguity.
    """

    effects: tuple[str, ...] = Field(default=(), description="Raw EFF entries")

    @field_validator("effects", mode="before")
    @classmethod
    def normalize_effects(cls, v: Any) -> tuple[str, ...]:
        from varianteffect.effects.parser import normalize_payload

        return normalize_payload(v)
