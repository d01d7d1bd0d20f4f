"""Interfaces the annotator consumes from the enclosing engine.

The engine owns header parsing and indexed record lookup. The annotator only needs
the two narrow capabilities below. ``InMemoryTrack`` implements both over plain
Python data for the CLI and for tests.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from varianteffect.constants import SNPEFF_INFO_FIELD_KEY
from varianteffect.models.variant import CandidateRecord, Locus


class HeaderSource(Protocol):
    """Header metadata of a named track."""

    def header_metadata(self, track_name: str) -> Mapping[str, str] | None:
        """Header key/value lines for ``track_name``, or None if no such track is bound."""
        ...


class CandidateSource(Protocol):
    """Records of a named track that start at a given locus."""

    def records_starting_at(self, track_name: str, locus: Locus) -> list[CandidateRecord]:
        """Records whose start equals ``locus`` exactly, in file order."""
        ...


class InMemoryTrack:
    """A single SnpEff track held in memory, looked up by exact start locus."""

    def __init__(
        self,
        name: str,
        header: Mapping[str, str] | None,
        records: Iterable[CandidateRecord] = (),
    ) -> None:
        self.name = name
        self.header = dict(header) if header is not None else None
        self._records: dict[Locus, list[CandidateRecord]] = defaultdict(list)
        for record in records:
            self._records[record.locus].append(record)

    @classmethod
    def from_dict(
        cls, name: str, data: Mapping[str, Any], info_field_key: str = SNPEFF_INFO_FIELD_KEY
    ) -> "InMemoryTrack":
        """Build a track from ``{"header": {...}, "candidates": [...]}``.

        A candidate gives its EFF payload either directly as ``effects`` or inside an
        ``info`` mapping under ``info_field_key``.
        """
        records = []
        for item in data.get("candidates", []):
            item = dict(item)
            info = item.pop("info", None) or {}
            if not isinstance(info, Mapping):
                raise ValueError(f"Candidate 'info' must be a mapping, got {type(info).__name__}")
            if "effects" not in item:
                item["effects"] = info.get(info_field_key)
            records.append(CandidateRecord(**item))
        return cls(name=name, header=data.get("header") or {}, records=records)

    def header_metadata(self, track_name: str) -> Mapping[str, str] | None:
        if track_name != self.name:
            return None
        return self.header

    def records_starting_at(self, track_name: str, locus: Locus) -> list[CandidateRecord]:
        if track_name != self.name:
            return []
        return list(self._records.get(locus, []))

    def __len__(self) -> int:
        return sum(len(records) for records in self._records.values())
