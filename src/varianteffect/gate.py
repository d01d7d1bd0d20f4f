"""Run-level compatibility check of the SnpEff input header.

We refuse to parse SnpEff output generated by an unsupported version, or lacking the
version and command-line header lines. Every failure here aborts the whole run
before any variant is processed.
"""

import logging
from collections.abc import Collection, Mapping

from varianteffect.constants import (
    DEFAULT_SUPPORTED_SNPEFF_VERSIONS,
    DEFAULT_TRACK_NAME,
    SNPEFF_VCF_HEADER_COMMAND_LINE_KEY,
    SNPEFF_VCF_HEADER_VERSION_LINE_KEY,
)
from varianteffect.exceptions import ConfigurationError
from varianteffect.models.header import RunMetadata

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def extract_version(version_line: str) -> str:
    """First whitespace-delimited token of the version line, with quotes removed."""
    tokens = version_line.replace('"', "").split()
    return tokens[0] if tokens else ""


def check_compatibility(
    header: Mapping[str, str | None] | None,
    supported_versions: Collection[str] = DEFAULT_SUPPORTED_SNPEFF_VERSIONS,
    version_key: str = SNPEFF_VCF_HEADER_VERSION_LINE_KEY,
    command_line_key: str = SNPEFF_VCF_HEADER_COMMAND_LINE_KEY,
    track_name: str = DEFAULT_TRACK_NAME,
) -> RunMetadata:
    """Verify the SnpEff header and return its run metadata.

    Args:
        header: Header key/value lines of the SnpEff track, or None when no such
            track is bound
        supported_versions: Exact version strings we accept
        version_key: Header key of the version line
        command_line_key: Header key of the command-line line
        track_name: Name of the SnpEff track, for error messages

    Returns:
        RunMetadata carrying the original header values

    Raises:
        ConfigurationError: If the track is missing, a header line is absent or
            blank, or the version is not supported
    """
    supported = sorted(supported_versions)

    if header is None:
        raise ConfigurationError(
            "The SnpEff annotator requires that a SnpEff VCF output file be provided, "
            f"but no '{track_name}' track was found."
        )

    version_line = header.get(version_key)
    if _is_blank(version_line):
        raise ConfigurationError(
            f"Could not find a {version_key} entry in the VCF header for the SnpEff input file, "
            f"and so could not verify that the file was generated by a supported version of SnpEff {supported}"
        )

    version = extract_version(version_line)
    if version not in supported_versions:
        raise ConfigurationError(
            f"The version of SnpEff used to generate the SnpEff input file ({version}) is not "
            f"currently supported. Supported versions are: {supported}"
        )

    command_line = header.get(command_line_key)
    if _is_blank(command_line):
        raise ConfigurationError(
            f"Could not find a {command_line_key} entry in the VCF header for the SnpEff input file, "
            f"which should be added by all supported versions of SnpEff {supported}"
        )

    logger.info(f"SnpEff input file generated by supported SnpEff version {version}")
    return RunMetadata(version=version_line, command_line=command_line)
