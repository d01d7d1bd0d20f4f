"""Explicit registry of annotators the CLI can run.

Annotators register themselves by name with ``register_annotator``. Lookups of
unknown names are configuration errors.
"""

from collections.abc import Callable
from typing import Protocol

from varianteffect.exceptions import ConfigurationError
from varianteffect.models.header import HeaderLine, InfoFieldDescription
from varianteffect.models.variant import VariantRecord


class Annotator(Protocol):
    """Initialize once per run, then annotate one variant at a time."""

    def initialize(self) -> list[HeaderLine]:
        ...

    def annotate(self, variant: VariantRecord) -> dict[str, str] | None:
        ...

    def key_names(self) -> list[str]:
        ...

    def descriptions(self) -> list[InfoFieldDescription]:
        ...


_ANNOTATORS: dict[str, type] = {}


def register_annotator(name: str) -> Callable[[type], type]:
    """Class decorator adding an annotator to the registry under ``name``."""

    def decorator(cls: type) -> type:
        if name in _ANNOTATORS and _ANNOTATORS[name] is not cls:
            raise ValueError(f"Annotator '{name}' is already registered to {_ANNOTATORS[name].__name__}")
        _ANNOTATORS[name] = cls
        return cls

    return decorator


def get_annotator(name: str) -> type:
    """Annotator class registered under ``name``."""
    try:
        return _ANNOTATORS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown annotator '{name}'. Available annotators: {available_annotators()}"
        ) from None


def available_annotators() -> list[str]:
    return sorted(_ANNOTATORS)
