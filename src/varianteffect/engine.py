"""SnpEff annotator: picks the most significant effect for each variant.

ARCHITECTURE:
    initialize(): SnpEff header → check_compatibility → renamed header lines (once)
    annotate():   VariantRecord → find_matching_record → parse_effects →
                  most_significant_effect → effect_annotations

Key Design:
- The compatibility gate runs once, before any variant; its failures abort the run
- Per-variant work reads only caller-supplied inputs, so independent variants can be
  annotated from a thread pool once initialize() has returned
- Malformed EFF entries are logged and skipped; a variant with nothing usable simply
  gets no annotations
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from varianteffect.config import ResolverSettings
from varianteffect.effects.emitter import effect_annotations, info_field_descriptions, key_names
from varianteffect.effects.matcher import find_matching_record
from varianteffect.effects.parser import parse_effects
from varianteffect.effects.ranking import most_significant_effect
from varianteffect.gate import check_compatibility
from varianteffect.models.effect import ParsedRecord
from varianteffect.models.header import HeaderLine, InfoFieldDescription, RunMetadata
from varianteffect.models.variant import VariantRecord
from varianteffect.registry import register_annotator
from varianteffect.sources import CandidateSource, HeaderSource
from varianteffect.utils.logging_config import get_logger

logger = logging.getLogger(__name__)


@register_annotator("snpeff")
class SnpEffAnnotator:
    """
    Annotator built on the output of the SnpEff variant effect predictor.

    For each variant, chooses one of the effects of highest biological impact from
    the SnpEff record with the same alleles and emits SNPEFF_* annotations for it.
    """

    def __init__(
        self,
        header_source: HeaderSource,
        candidate_source: CandidateSource,
        settings: ResolverSettings | None = None,
    ):
        self.settings = settings or ResolverSettings()
        self.header_source = header_source
        self.candidate_source = candidate_source
        self.decision_logger = (
            get_logger(
                log_dir=self.settings.log_dir,
                enable_file_logging=self.settings.log_dir is not None,
            )
            if self.settings.enable_logging
            else None
        )
        self._metadata: RunMetadata | None = None

    @property
    def is_initialized(self) -> bool:
        return self._metadata is not None

    @property
    def metadata(self) -> RunMetadata | None:
        return self._metadata

    def initialize(self) -> list[HeaderLine]:
        """Check the SnpEff header and return the header lines to add to the output.

        Raises:
            ConfigurationError: If the SnpEff track or its header lines are missing,
                or the SnpEff version is unsupported
        """
        if self._metadata is None:
            header = self.header_source.header_metadata(self.settings.track_name)
            self._metadata = check_compatibility(
                header,
                supported_versions=self.settings.supported_versions,
                version_key=self.settings.version_header_key,
                command_line_key=self.settings.command_line_header_key,
                track_name=self.settings.track_name,
            )
            if self.decision_logger:
                self.decision_logger.log_run_start(self._metadata, self.settings.track_name)

        return self._metadata.output_header_lines()

    def parse_variant(self, variant: VariantRecord) -> ParsedRecord | None:
        """Parse the EFF entries of the SnpEff record matching ``variant``.

        Returns None when no SnpEff record starts at the variant's locus with the
        same reference and alternate alleles.
        """
        if self._metadata is None:
            raise RuntimeError("initialize() must be called before annotating variants")

        # Only records that start at this locus, not merely span it
        candidates = self.candidate_source.records_starting_at(self.settings.track_name, variant.locus)
        matching_record = find_matching_record(candidates, variant)
        if matching_record is None:
            if self.decision_logger:
                self.decision_logger.log_no_match(variant.locus)
            return None

        parsed = parse_effects(matching_record)
        if self.decision_logger:
            for rejection in parsed.rejections:
                self.decision_logger.log_rejection(rejection)
        return parsed

    def annotate(self, variant: VariantRecord) -> dict[str, str] | None:
        """SNPEFF_* annotations for ``variant``, or None when there is nothing to add."""
        parsed = self.parse_variant(variant)
        if parsed is None or not parsed.effects:
            return None

        effect = most_significant_effect(parsed.effects)
        if self.decision_logger:
            self.decision_logger.log_selection(variant.locus, effect, candidate_count=len(parsed.effects))

        return effect_annotations(effect)

    def batch_annotate(
        self, variants: Sequence[VariantRecord], max_workers: int = 1
    ) -> list[dict[str, str] | None]:
        """
        Annotate many variants, preserving input order.

        With max_workers > 1 independent variants are spread over a thread pool.
        initialize() must already have run.
        """
        if self._metadata is None:
            raise RuntimeError("initialize() must be called before annotating variants")

        if max_workers <= 1:
            results = [self.annotate(variant) for variant in variants]
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                results = list(executor.map(self.annotate, variants))

        logger.info(
            f"Annotated {sum(1 for r in results if r is not None)}/{len(variants)} variants"
        )
        return results

    def key_names(self) -> list[str]:
        return key_names()

    def descriptions(self) -> list[InfoFieldDescription]:
        return info_field_descriptions()
