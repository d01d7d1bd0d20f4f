"""Run configuration for the SnpEff annotator."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from varianteffect.constants import (
    DEFAULT_SUPPORTED_SNPEFF_VERSIONS,
    DEFAULT_TRACK_NAME,
    ENV_LOG_DIR,
    ENV_SUPPORTED_VERSIONS,
    ENV_TRACK_NAME,
    SNPEFF_INFO_FIELD_KEY,
    SNPEFF_VCF_HEADER_COMMAND_LINE_KEY,
    SNPEFF_VCF_HEADER_VERSION_LINE_KEY,
)
from varianteffect.models.downsampling import DownsamplingMethod


class ResolverSettings(BaseModel):
    """Settings passed explicitly to the annotator and its compatibility gate."""

    model_config = ConfigDict(frozen=True)

    track_name: str = Field(DEFAULT_TRACK_NAME, description="Name of the SnpEff input track")
    supported_versions: tuple[str, ...] = Field(
        DEFAULT_SUPPORTED_SNPEFF_VERSIONS, description="SnpEff versions we accept"
    )
    version_header_key: str = SNPEFF_VCF_HEADER_VERSION_LINE_KEY
    command_line_header_key: str = SNPEFF_VCF_HEADER_COMMAND_LINE_KEY
    info_field_key: str = SNPEFF_INFO_FIELD_KEY
    enable_logging: bool = Field(True, description="Record effect decisions")
    log_dir: Path | None = Field(None, description="Directory for JSONL decision logs; None disables file logging")
    downsampling: DownsamplingMethod = Field(default_factory=DownsamplingMethod.none)

    @field_validator("supported_versions")
    @classmethod
    def require_supported_versions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        versions = tuple(version.strip() for version in v if version.strip())
        if not versions:
            raise ValueError("At least one supported SnpEff version is required")
        return versions

    @classmethod
    def from_env(cls, **overrides) -> "ResolverSettings":
        """Build settings from VARIANTEFFECT_* environment variables.

        Explicit keyword overrides win over the environment. Call ``load_dotenv()``
        first to pick up a ``.env`` file.
        """
        values: dict = {}

        versions = os.getenv(ENV_SUPPORTED_VERSIONS)
        if versions:
            values["supported_versions"] = tuple(versions.split(","))

        track_name = os.getenv(ENV_TRACK_NAME)
        if track_name:
            values["track_name"] = track_name

        log_dir = os.getenv(ENV_LOG_DIR)
        if log_dir:
            values["log_dir"] = Path(log_dir)

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
