"""Pytest configuration and fixtures."""

import pytest


# Nine-field entries, positions:
# IMPACT|FUNCTIONAL_CLASS|CODON|AA|GENE|BIOTYPE|CODING|TRANSCRIPT|EXON
MISSENSE_ENTRY = "NON_SYNONYMOUS_CODING(HIGH|MISSENSE|aTg/aCg|M1T|GENE1|protein_coding|CODING|TX1|EX1)"
SYNONYMOUS_ENTRY = "SYNONYMOUS_CODING(LOW|SILENT|ctG/ctA|L12|GENE1|protein_coding|CODING|TX2|EX2)"
INTRON_ENTRY = "INTRON(MODIFIER||||GENE2|processed_transcript|NON_CODING|TX3|)"
WARNING_ENTRY = (
    "NON_SYNONYMOUS_CODING(MODERATE|MISSENSE|Gac/Aac|D5N|GENE3|protein_coding|CODING|TX4|EX4|"
    "WARNING_TRANSCRIPT_INCOMPLETE)"
)


@pytest.fixture(autouse=True)
def reset_decision_logger():
    """Each test gets a fresh global decision logger."""
    from varianteffect.utils.logging_config import reset_logger

    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def snpeff_header():
    """Header lines of a SnpEff 2.0.4 output file."""
    return {
        "SnpEffVersion": '"2.0.4 (build 2011-10-08), by Pablo Cingolani"',
        "SnpEffCmd": '"SnpEff  -c snpEff.config -o vcf hg19 input.vcf "',
    }


@pytest.fixture
def sample_variant():
    """Sample variant to annotate."""
    from varianteffect.models.variant import VariantRecord

    return VariantRecord(chrom="1", pos=69270, ref="A", alts=["G"])


@pytest.fixture
def sample_candidate():
    """SnpEff record matching sample_variant, with three effects."""
    from varianteffect.models.variant import CandidateRecord

    return CandidateRecord(
        chrom="1",
        pos=69270,
        ref="A",
        alts=["G"],
        effects=[INTRON_ENTRY, SYNONYMOUS_ENTRY, MISSENSE_ENTRY],
    )


@pytest.fixture
def sample_track(snpeff_header, sample_candidate):
    """In-memory SnpEff track holding sample_candidate."""
    from varianteffect.sources import InMemoryTrack

    return InMemoryTrack(name="snpeff", header=snpeff_header, records=[sample_candidate])


@pytest.fixture
def quiet_settings():
    """Settings with decision logging disabled."""
    from varianteffect.config import ResolverSettings

    return ResolverSettings(enable_logging=False)


@pytest.fixture
def sample_annotator(sample_track, quiet_settings):
    """Initialized annotator over sample_track."""
    from varianteffect.engine import SnpEffAnnotator

    annotator = SnpEffAnnotator(header_source=sample_track, candidate_source=sample_track, settings=quiet_settings)
    annotator.initialize()
    return annotator


@pytest.fixture
def make_effect():
    """Factory for well-formed effects with overridable fields."""
    from varianteffect.models.effect import Effect
    from varianteffect.models.vocabulary import (
        EffectCoding,
        EffectFunctionalClass,
        EffectImpact,
        EffectType,
    )

    def _make(
        effect_type=EffectType.NON_SYNONYMOUS_CODING,
        impact=EffectImpact.MODERATE,
        functional_class=EffectFunctionalClass.MISSENSE,
        coding=EffectCoding.CODING,
        **kwargs,
    ):
        return Effect(
            effect_type=effect_type,
            impact=impact,
            functional_class=functional_class,
            coding=coding,
            **kwargs,
        )

    return _make
