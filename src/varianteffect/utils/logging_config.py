"""Logging configuration for effect selection decisions.

Provides structured logging of which effect was chosen for each variant and which
EFF entries were rejected, for auditing and debugging SnpEff inputs.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

from varianteffect.models.effect import Effect, RejectedEntry
from varianteffect.models.header import RunMetadata
from varianteffect.models.variant import Locus


class EffectDecisionLogger:
    """Logger for effect decisions with structured output."""

    def __init__(self, log_dir: Path | None = None, enable_file_logging: bool = True):
        """Initialize the effect decision logger.

        Args:
            log_dir: Directory for log files. Defaults to ./logs
            enable_file_logging: Whether to write JSONL decision logs to files
        """
        self.requested_log_dir = log_dir
        self.enable_file_logging = enable_file_logging

        self.logger = logging.getLogger("varianteffect.decisions")
        self.logger.setLevel(logging.DEBUG)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        # Console handler for human-readable output
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

        # File handler receives only the DEBUG-level JSON lines
        self.file_handler = None
        if enable_file_logging:
            if log_dir is None:
                log_dir = Path("./logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d")
            log_file = log_dir / f"effect_decisions_{timestamp}.jsonl"

            self.file_handler = logging.FileHandler(log_file)
            self.file_handler.setLevel(logging.DEBUG)
            self.file_handler.setFormatter(logging.Formatter('%(message)s'))
            self.file_handler.addFilter(lambda record: record.levelno == logging.DEBUG)
            self.logger.addHandler(self.file_handler)

            self.log_file = log_file
            self.logger.info(f"Effect decision logging enabled: {log_file}")
        else:
            self.log_file = None

    def _write_event(self, event_type: str, **payload) -> None:
        if not self.file_handler:
            return
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **payload,
        }
        self.logger.debug(json.dumps(log_entry))

    def log_run_start(self, metadata: RunMetadata, track_name: str) -> None:
        """Log the SnpEff header that passed the compatibility check."""
        self.logger.info(f"Annotating from SnpEff track '{track_name}' ({metadata.version})")
        self._write_event(
            "run_start",
            track_name=track_name,
            snpeff_version=metadata.version,
            snpeff_command_line=metadata.command_line,
        )

    def log_selection(self, locus: Locus, effect: Effect, candidate_count: int) -> None:
        """Log the effect chosen for a variant."""
        self._write_event(
            "effect_selected",
            locus=str(locus),
            candidate_count=candidate_count,
            effect=effect.model_dump(mode="json"),
        )

    def log_rejection(self, rejection: RejectedEntry) -> None:
        """Log an EFF entry dropped during parsing."""
        self._write_event(
            "effect_rejected",
            locus=str(rejection.locus),
            raw=rejection.raw,
            reason=rejection.reason,
        )

    def log_no_match(self, locus: Locus) -> None:
        """Log a variant with no SnpEff record carrying the same alleles."""
        self._write_event("no_matching_record", locus=str(locus))

    def log_run_summary(self, total: int, annotated: int) -> None:
        """Log a high-level summary for easy review."""
        summary = (
            f"\n{'='*80}\n"
            f"SNPEFF ANNOTATION SUMMARY\n"
            f"{'='*80}\n"
            f"Variants processed: {total}\n"
            f"Variants annotated: {annotated}\n"
            f"{'='*80}\n"
        )
        self.logger.info(summary)
        self._write_event("run_summary", total=total, annotated=annotated)

    def is_configured_for(self, log_dir: Path | None, enable_file_logging: bool) -> bool:
        """True when this logger was built with the given arguments."""
        return self.requested_log_dir == log_dir and self.enable_file_logging == enable_file_logging

    def close(self) -> None:
        """Detach and close the file handler."""
        if self.file_handler:
            self.logger.removeHandler(self.file_handler)
            self.file_handler.close()
            self.file_handler = None


# Global logger instance
_global_logger: EffectDecisionLogger | None = None


def get_logger(log_dir: Path | None = None, enable_file_logging: bool = True) -> EffectDecisionLogger:
    """Get or create the global effect decision logger.

    The global logger is rebuilt when called with a different log directory or
    file logging flag than it was created with.
    """
    global _global_logger

    if _global_logger is not None and not _global_logger.is_configured_for(log_dir, enable_file_logging):
        _global_logger.close()
        _global_logger = None

    if _global_logger is None:
        _global_logger = EffectDecisionLogger(log_dir=log_dir, enable_file_logging=enable_file_logging)

    return _global_logger


def reset_logger() -> None:
    """Reset the global logger (mainly for testing)."""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = None
