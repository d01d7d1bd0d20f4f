"""Centralized constants for varianteffect.

This module consolidates the fixed values of the SnpEff EFF micro-format and of the
VCF header lines we read and write:
- Header keys written by SnpEff and the renamed keys we echo into our output
- Delimiters of the EFF INFO field
- Subfield layout of the effect metadata
- Defaults for the run configuration

Centralizing these makes maintenance easier and ensures consistency.
"""

# =============================================================================
# SNPEFF HEADER LINES
# =============================================================================
# SnpEff writes its version and command line into the VCF header. We refuse to
# parse files that lack either line or come from an unsupported version.

DEFAULT_SUPPORTED_SNPEFF_VERSIONS: tuple[str, ...] = ("2.0.4",)

SNPEFF_VCF_HEADER_VERSION_LINE_KEY = "SnpEffVersion"
SNPEFF_VCF_HEADER_COMMAND_LINE_KEY = "SnpEffCmd"

# Our output must never be mistaken for a file produced by SnpEff itself
OUTPUT_VCF_HEADER_VERSION_LINE_KEY = "Original" + SNPEFF_VCF_HEADER_VERSION_LINE_KEY
OUTPUT_VCF_HEADER_COMMAND_LINE_KEY = "Original" + SNPEFF_VCF_HEADER_COMMAND_LINE_KEY


# =============================================================================
# EFF INFO FIELD FORMAT
# =============================================================================
# EFF=EFFECT_NAME(IMPACT|FUNCTIONAL_CLASS|CODON|AA|GENE|BIOTYPE|CODING|TRANSCRIPT|EXON),...

SNPEFF_INFO_FIELD_KEY = "EFF"
SNPEFF_EFFECT_METADATA_DELIMITER = r"[()]"
SNPEFF_EFFECT_METADATA_SUBFIELD_DELIMITER = "|"

EXPECTED_NUMBER_OF_METADATA_FIELDS = 9
NUMBER_OF_METADATA_FIELDS_UPON_EITHER_WARNING_OR_ERROR = 10
NUMBER_OF_METADATA_FIELDS_UPON_BOTH_WARNING_AND_ERROR = 11

# A lone warning or error sits in the last field. With both, the warning is
# second-to-last and the error is last.
SNPEFF_WARNING_OR_ERROR_FIELD_UPON_SINGLE_ERROR = NUMBER_OF_METADATA_FIELDS_UPON_EITHER_WARNING_OR_ERROR - 1
SNPEFF_WARNING_FIELD_UPON_BOTH_WARNING_AND_ERROR = NUMBER_OF_METADATA_FIELDS_UPON_BOTH_WARNING_AND_ERROR - 2
SNPEFF_ERROR_FIELD_UPON_BOTH_WARNING_AND_ERROR = NUMBER_OF_METADATA_FIELDS_UPON_BOTH_WARNING_AND_ERROR - 1

# Positions within the 9-field metadata
IMPACT_FIELD_INDEX = 0
FUNCTIONAL_CLASS_FIELD_INDEX = 1
CODON_CHANGE_FIELD_INDEX = 2
AMINO_ACID_CHANGE_FIELD_INDEX = 3
GENE_NAME_FIELD_INDEX = 4
GENE_BIOTYPE_FIELD_INDEX = 5
# Used for ranking only; derivable from the gene biotype so never emitted
CODING_FIELD_INDEX = 6
TRANSCRIPT_ID_FIELD_INDEX = 7
EXON_ID_FIELD_INDEX = 8


# =============================================================================
# RUN CONFIGURATION DEFAULTS
# =============================================================================

DEFAULT_TRACK_NAME = "snpeff"
DEFAULT_ANNOTATOR = "snpeff"

# Default target coverage for locus-based traversals
DEFAULT_LOCUS_BASED_TRAVERSAL_DOWNSAMPLING_COVERAGE = 1000

# Environment variables read by ResolverSettings.from_env()
ENV_SUPPORTED_VERSIONS = "VARIANTEFFECT_SUPPORTED_VERSIONS"
ENV_TRACK_NAME = "VARIANTEFFECT_TRACK_NAME"
ENV_LOG_DIR = "VARIANTEFFECT_LOG_DIR"
