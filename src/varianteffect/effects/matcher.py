"""Selection of the SnpEff record that describes a given variant."""

from collections.abc import Iterable

from varianteffect.models.variant import CandidateRecord, VariantRecord


def find_matching_record(
    candidates: Iterable[CandidateRecord], variant: VariantRecord
) -> CandidateRecord | None:
    """Return the first candidate that starts at the variant's locus with the same alleles.

    Records that merely overlap the variant are never considered: the start
    position must be identical. If several records match we take the first one,
    assuming SnpEff reports the same effects for all of them.
    """
    for candidate in candidates:
        if candidate.locus == variant.locus and candidate.has_same_alleles_as(variant):
            return candidate

    return None
