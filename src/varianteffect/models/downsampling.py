"""Downsampling settings for a run.

A validated value object: a method plus either a target coverage or a target
fraction (never both), and a flag selecting the legacy implementation.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from varianteffect.constants import DEFAULT_LOCUS_BASED_TRAVERSAL_DOWNSAMPLING_COVERAGE
from varianteffect.exceptions import ConfigurationError


class DownsampleType(str, Enum):
    """How reads are downsampled at a locus."""

    NONE = "NONE"
    ALL_READS = "ALL_READS"
    BY_SAMPLE = "BY_SAMPLE"


class TraversalKind(str, Enum):
    """Shape of the traversal the settings will be applied to."""

    LOCUS = "locus"
    ACTIVE_REGION = "active_region"
    READ = "read"

    @property
    def is_locus_based(self) -> bool:
        return self in (TraversalKind.LOCUS, TraversalKind.ACTIVE_REGION)


DEFAULT_DOWNSAMPLING_TYPE = DownsampleType.BY_SAMPLE


class DownsamplingMethod(BaseModel):
    """Downsampling method and target."""

    model_config = ConfigDict(frozen=True)

    method: DownsampleType = Field(DEFAULT_DOWNSAMPLING_TYPE, description="Type of downsampling to perform")
    to_coverage: int | None = Field(None, description="Target as an integer number of reads")
    to_fraction: float | None = Field(None, description="Target as a fraction of available reads")
    use_legacy_downsampler: bool = Field(False, description="Use the legacy implementation")

    @model_validator(mode="before")
    @classmethod
    def apply_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("method") is None:
            data["method"] = DEFAULT_DOWNSAMPLING_TYPE
        # No downsampling means no target
        if DownsampleType(data["method"]) == DownsampleType.NONE:
            data["to_coverage"] = None
            data["to_fraction"] = None
        return data

    @model_validator(mode="after")
    def validate_target(self) -> "DownsamplingMethod":
        if self.method != DownsampleType.NONE and self.to_fraction is None and self.to_coverage is None:
            raise ValueError("Must specify either to_fraction or to_coverage when downsampling.")

        if self.to_fraction is not None and self.to_coverage is not None:
            raise ValueError("Downsampling coverage and fraction are both specified. Please choose only one.")

        if self.to_coverage is not None and self.to_coverage <= 0:
            raise ValueError("to_coverage must be > 0 when downsampling to coverage")

        if self.to_fraction is not None and not 0.0 <= self.to_fraction <= 1.0:
            raise ValueError("to_fraction must be >= 0.0 and <= 1.0 when downsampling to a fraction of reads")

        return self

    @classmethod
    def none(cls, use_legacy_downsampler: bool = False) -> "DownsamplingMethod":
        """No downsampling at all."""
        return cls(method=DownsampleType.NONE, use_legacy_downsampler=use_legacy_downsampler)

    @classmethod
    def default_for_traversal(cls, kind: TraversalKind, use_legacy_downsampler: bool = False) -> "DownsamplingMethod":
        """Locus-based traversals downsample by sample to a fixed coverage; others are off."""
        if kind.is_locus_based:
            return cls(
                method=DEFAULT_DOWNSAMPLING_TYPE,
                to_coverage=DEFAULT_LOCUS_BASED_TRAVERSAL_DOWNSAMPLING_COVERAGE,
                use_legacy_downsampler=use_legacy_downsampler,
            )
        return cls.none(use_legacy_downsampler=use_legacy_downsampler)

    def check_compatibility_with_traversal(self, kind: TraversalKind) -> None:
        """Raise ConfigurationError for combinations an implementation cannot run.

        The legacy implementation cannot downsample read traversals to a coverage, and
        the newer one does not yet support ALL_READS to-coverage for locus traversals.
        """
        if not kind.is_locus_based and self.use_legacy_downsampler and self.to_coverage is not None:
            raise ConfigurationError(
                "Downsampling to coverage for read-based traversals is not supported in the legacy "
                "downsampling implementation. The newer downsampling implementation does not have "
                "this limitation."
            )

        if (
            kind.is_locus_based
            and not self.use_legacy_downsampler
            and self.method == DownsampleType.ALL_READS
            and self.to_coverage is not None
        ):
            raise ConfigurationError(
                "Downsampling to coverage with the ALL_READS method for locus-based traversals is not "
                "yet supported in the new downsampling implementation (though it is supported for "
                "read-based traversals)."
            )

    def __str__(self) -> str:
        text = "Downsampling Settings: "

        if self.method == DownsampleType.NONE:
            return text + "No downsampling"

        text += f"Method: {self.method.value}, "
        if self.to_coverage is not None:
            text += f"Target Coverage: {self.to_coverage}, "
        else:
            text += f"Target Fraction: {self.to_fraction:.2f}, "

        if self.use_legacy_downsampler:
            text += "Using the legacy downsampling implementation"
        else:
            text += "Using the new downsampling implementation"

        return text
