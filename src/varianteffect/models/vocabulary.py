"""Closed SnpEff vocabularies: effect types, impacts, functional classes, coding status.

Every token read from an EFF field is resolved against one of these enums by exact
name. Resolution goes through ``parse``, which returns either the member or a
``ParseFailure`` value; unrecognized input is never an exception.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ParseFailure(BaseModel):
    """A token that is not a member of the vocabulary it was checked against."""

    model_config = ConfigDict(frozen=True)

    vocabulary: str
    token: str

    @property
    def message(self) -> str:
        return f"Unrecognized value for {self.vocabulary}: {self.token}"


class SnpEffVocabulary(str, Enum):
    """Base for the SnpEff enums. Members carry their own name as value."""

    @classmethod
    def label(cls) -> str:
        return cls.__name__

    @classmethod
    def parse(cls, token: str) -> "SnpEffVocabulary | ParseFailure":
        """Resolve ``token`` by exact, case-sensitive member name."""
        member = cls.__members__.get(token)
        if member is None:
            return ParseFailure(vocabulary=cls.label(), token=token)
        return member

    def __str__(self) -> str:
        return self.value


class EffectType(SnpEffVocabulary):
    """Biological effects SnpEff can report.

    The grouping below follows SnpEff's documentation. It has no runtime meaning:
    only the impact reported alongside each effect is used for ranking.
    """

    # High-impact effects
    SPLICE_SITE_ACCEPTOR = "SPLICE_SITE_ACCEPTOR"
    SPLICE_SITE_DONOR = "SPLICE_SITE_DONOR"
    START_LOST = "START_LOST"
    EXON_DELETED = "EXON_DELETED"
    FRAME_SHIFT = "FRAME_SHIFT"
    STOP_GAINED = "STOP_GAINED"
    STOP_LOST = "STOP_LOST"

    # Moderate-impact effects
    NON_SYNONYMOUS_CODING = "NON_SYNONYMOUS_CODING"
    CODON_CHANGE = "CODON_CHANGE"
    CODON_INSERTION = "CODON_INSERTION"
    CODON_CHANGE_PLUS_CODON_INSERTION = "CODON_CHANGE_PLUS_CODON_INSERTION"
    CODON_DELETION = "CODON_DELETION"
    CODON_CHANGE_PLUS_CODON_DELETION = "CODON_CHANGE_PLUS_CODON_DELETION"
    UTR_5_DELETED = "UTR_5_DELETED"
    UTR_3_DELETED = "UTR_3_DELETED"

    # Low-impact effects
    SYNONYMOUS_START = "SYNONYMOUS_START"
    NON_SYNONYMOUS_START = "NON_SYNONYMOUS_START"
    START_GAINED = "START_GAINED"
    SYNONYMOUS_CODING = "SYNONYMOUS_CODING"
    SYNONYMOUS_STOP = "SYNONYMOUS_STOP"
    NON_SYNONYMOUS_STOP = "NON_SYNONYMOUS_STOP"

    # Modifiers
    NONE = "NONE"
    CHROMOSOME = "CHROMOSOME"
    CUSTOM = "CUSTOM"
    CDS = "CDS"
    GENE = "GENE"
    TRANSCRIPT = "TRANSCRIPT"
    EXON = "EXON"
    INTRON_CONSERVED = "INTRON_CONSERVED"
    UTR_5_PRIME = "UTR_5_PRIME"
    UTR_3_PRIME = "UTR_3_PRIME"
    DOWNSTREAM = "DOWNSTREAM"
    INTRAGENIC = "INTRAGENIC"
    INTERGENIC = "INTERGENIC"
    INTERGENIC_CONSERVED = "INTERGENIC_CONSERVED"
    UPSTREAM = "UPSTREAM"
    REGULATION = "REGULATION"
    INTRON = "INTRON"

    @classmethod
    def label(cls) -> str:
        return "effect type"


class EffectImpact(SnpEffVocabulary):
    """SnpEff impact rating: LOW, MODERATE or HIGH impact, or a MODIFIER."""

    MODIFIER = "MODIFIER"
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"

    @classmethod
    def label(cls) -> str:
        return "effect impact"

    @property
    def severity(self) -> int:
        return _IMPACT_SEVERITY[self]

    def is_higher_impact_than(self, other: "EffectImpact") -> bool:
        return self.severity > other.severity

    def is_same_impact_as(self, other: "EffectImpact") -> bool:
        return self.severity == other.severity


class EffectFunctionalClass(SnpEffVocabulary):
    """Functional class SnpEff assigns to an effect. Breaks ties between equal impacts."""

    NONE = "NONE"
    SILENT = "SILENT"
    MISSENSE = "MISSENSE"
    NONSENSE = "NONSENSE"

    @classmethod
    def label(cls) -> str:
        return "effect functional class"

    @property
    def priority(self) -> int:
        return _FUNCTIONAL_CLASS_PRIORITY[self]

    def is_higher_priority_than(self, other: "EffectFunctionalClass") -> bool:
        return self.priority > other.priority


class EffectCoding(SnpEffVocabulary):
    """Whether the effect lies within a coding gene. SnpEff sometimes omits it."""

    CODING = "CODING"
    NON_CODING = "NON_CODING"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def label(cls) -> str:
        return "effect coding"


_IMPACT_SEVERITY: dict[EffectImpact, int] = {
    EffectImpact.MODIFIER: 0,
    EffectImpact.LOW: 1,
    EffectImpact.MODERATE: 2,
    EffectImpact.HIGH: 3,
}

_FUNCTIONAL_CLASS_PRIORITY: dict[EffectFunctionalClass, int] = {
    EffectFunctionalClass.NONE: 0,
    EffectFunctionalClass.SILENT: 1,
    EffectFunctionalClass.MISSENSE: 2,
    EffectFunctionalClass.NONSENSE: 3,
}
