"""Data models for varianteffect."""

from varianteffect.models.downsampling import DownsampleType, DownsamplingMethod, TraversalKind
from varianteffect.models.effect import Effect, EffectParseResult, ParsedRecord, RejectedEntry
from varianteffect.models.header import HeaderLine, InfoFieldDescription, RunMetadata
from varianteffect.models.variant import CandidateRecord, Locus, VariantRecord
from varianteffect.models.vocabulary import (
    EffectCoding,
    EffectFunctionalClass,
    EffectImpact,
    EffectType,
    ParseFailure,
)

__all__ = [
    "Locus",
    "VariantRecord",
    "CandidateRecord",
    "EffectType",
    "EffectImpact",
    "EffectFunctionalClass",
    "EffectCoding",
    "ParseFailure",
    "Effect",
    "EffectParseResult",
    "RejectedEntry",
    "ParsedRecord",
    "HeaderLine",
    "RunMetadata",
    "InfoFieldDescription",
    "DownsampleType",
    "DownsamplingMethod",
    "TraversalKind",
]
