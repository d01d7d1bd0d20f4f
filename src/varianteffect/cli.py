"""Command-line interface for varianteffect.

ARCHITECTURE:
    CLI Commands → InMemoryTrack + registered Annotator → JSON Output

Workflows: annotate (batch), check-header (gate only), explain (one locus), schema

Key Design:
- Typer framework for auto-help and type validation
- Input is a JSON document with "header", "candidates" and "variants"
- Configuration errors print a message and exit with status 1
"""

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from dotenv import load_dotenv
from pydantic import ValidationError

import varianteffect.engine  # noqa: F401  registers the snpeff annotator
from varianteffect.config import ResolverSettings
from varianteffect.constants import DEFAULT_ANNOTATOR
from varianteffect.effects.ranking import rank_effects
from varianteffect.exceptions import ConfigurationError
from varianteffect.models.downsampling import DownsampleType, DownsamplingMethod, TraversalKind
from varianteffect.models.variant import VariantRecord
from varianteffect.registry import available_annotators, get_annotator
from varianteffect.sources import InMemoryTrack

load_dotenv()

app = typer.Typer(
    name="varianteffect",
    help="Pick the most significant SnpEff effect for each variant",
    add_completion=False,
)


def _load_input(input_file: Path) -> dict[str, Any]:
    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}")
        raise typer.Exit(1)

    try:
        with open(input_file, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        print(f"Error: Input file is not valid JSON: {e}")
        raise typer.Exit(1)

    if not isinstance(data, dict):
        print("Error: Input must be a JSON object with 'header', 'candidates' and 'variants'")
        raise typer.Exit(1)
    return data


def _build_annotator(data: dict[str, Any], settings: ResolverSettings, annotator_name: str = DEFAULT_ANNOTATOR):
    try:
        track = InMemoryTrack.from_dict(settings.track_name, data, info_field_key=settings.info_field_key)
        annotator_cls = get_annotator(annotator_name)
    except ConfigurationError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)
    except (ValidationError, ValueError, TypeError) as e:
        print(f"Error: Invalid SnpEff track in input: {e}")
        raise typer.Exit(1)

    return annotator_cls(header_source=track, candidate_source=track, settings=settings)


def _initialize(annotator) -> None:
    try:
        annotator.initialize()
    except ConfigurationError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)


def _load_variants(data: dict[str, Any]) -> list[VariantRecord]:
    try:
        return [VariantRecord(**item) for item in data.get("variants", [])]
    except (ValidationError, TypeError) as e:
        print(f"Error: Invalid variant record: {e}")
        raise typer.Exit(1)


@app.command()
def annotate(
    input_file: Path = typer.Argument(..., help="Input JSON file with header, candidates and variants"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output JSON file"),
    annotator_name: str = typer.Option(DEFAULT_ANNOTATOR, "--annotator", "-a", help="Registered annotator"),
    workers: int = typer.Option(1, "--workers", "-w", help="Threads used across variants"),
    supported_version: Optional[List[str]] = typer.Option(
        None, "--supported-version", help="Accepted SnpEff version (repeatable)"
    ),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for JSONL decision logs"),
    log: bool = typer.Option(True, "--log/--no-log", help="Enable effect decision logging"),
    downsampling_type: Optional[DownsampleType] = typer.Option(
        None, "--downsampling-type", help="Downsampling method (validated and reported only)"
    ),
    downsample_to_coverage: Optional[int] = typer.Option(
        None, "--downsample-to-coverage", help="Target coverage (validated and reported only)"
    ),
    downsample_to_fraction: Optional[float] = typer.Option(
        None, "--downsample-to-fraction", help="Target fraction (validated and reported only)"
    ),
    use_legacy_downsampler: bool = typer.Option(
        False, "--use-legacy-downsampler", help="Use the legacy downsampling implementation (validated and reported only)"
    ),
) -> None:
    """Annotate every variant in the input file."""
    data = _load_input(input_file)

    try:
        if downsampling_type is None and downsample_to_coverage is None and downsample_to_fraction is None:
            downsampling = DownsamplingMethod.none(use_legacy_downsampler=use_legacy_downsampler)
        else:
            downsampling = DownsamplingMethod(
                method=downsampling_type,
                to_coverage=downsample_to_coverage,
                to_fraction=downsample_to_fraction,
                use_legacy_downsampler=use_legacy_downsampler,
            )
        settings = ResolverSettings.from_env(
            supported_versions=tuple(supported_version) if supported_version else None,
            log_dir=log_dir,
            enable_logging=log,
            downsampling=downsampling,
        )
    except ValidationError as e:
        print(f"Error: Invalid settings: {e}")
        raise typer.Exit(1)

    # Annotation walks one locus at a time
    try:
        settings.downsampling.check_compatibility_with_traversal(TraversalKind.LOCUS)
    except ConfigurationError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)

    # Reads are never touched here; the settings are only checked and reported
    print(str(settings.downsampling))

    annotator = _build_annotator(data, settings, annotator_name)
    _initialize(annotator)
    variants = _load_variants(data)

    print(f"\nAnnotating {len(variants)} variants from {input_file}...")
    results = annotator.batch_annotate(variants, max_workers=workers)

    output_data = {
        "header": [line.model_dump() for line in annotator.initialize()],
        "info_fields": [field.model_dump() for field in annotator.descriptions()],
        "variants": [
            {**variant.model_dump(mode="json"), "annotations": annotations}
            for variant, annotations in zip(variants, results)
        ],
    }

    annotated = sum(1 for r in results if r is not None)
    if annotator.decision_logger:
        annotator.decision_logger.log_run_summary(total=len(variants), annotated=annotated)

    if output:
        with open(output, "w") as f:
            json.dump(output_data, f, indent=2)
        print(f"Saved to {output}")
    else:
        print(json.dumps(output_data, indent=2))

    print(f"\nAnnotated {annotated}/{len(variants)} variants")


@app.command("check-header")
def check_header(
    input_file: Path = typer.Argument(..., help="Input JSON file with a SnpEff header"),
    supported_version: Optional[List[str]] = typer.Option(
        None, "--supported-version", help="Accepted SnpEff version (repeatable)"
    ),
) -> None:
    """Check that the SnpEff header is present and from a supported version."""
    data = _load_input(input_file)
    settings = ResolverSettings.from_env(
        supported_versions=tuple(supported_version) if supported_version else None,
        enable_logging=False,
    )
    annotator = _build_annotator(data, settings)
    _initialize(annotator)

    print("SnpEff header OK")
    for line in annotator.initialize():
        print(str(line))


@app.command()
def explain(
    input_file: Path = typer.Argument(..., help="Input JSON file with header, candidates and variants"),
    chrom: str = typer.Argument(..., help="Chromosome of the variant"),
    pos: int = typer.Argument(..., help="Start position of the variant"),
) -> None:
    """Show every parsed effect for the variants at one locus, most significant first."""
    data = _load_input(input_file)
    settings = ResolverSettings.from_env(enable_logging=False)
    annotator = _build_annotator(data, settings)
    _initialize(annotator)

    variants = [v for v in _load_variants(data) if v.chrom == chrom and v.pos == pos]
    if not variants:
        print(f"No variant at {chrom}:{pos}")
        raise typer.Exit(1)

    for variant in variants:
        print(f"\nVariant: {variant.chrom}:{variant.pos} {variant.ref}>{','.join(variant.alts)}")
        parsed = annotator.parse_variant(variant)
        if parsed is None:
            print("  No SnpEff record with matching alleles")
            continue

        for rank, effect in enumerate(rank_effects(parsed.effects), 1):
            print(
                f"  {rank}. {effect.effect_type.value} | {effect.impact.value} | "
                f"{effect.functional_class.value} | {effect.coding.value} | {effect.gene_name or '-'}"
            )

        if parsed.rejections:
            print(f"  Rejected ({len(parsed.rejections)}):")
            for rejection in parsed.rejections:
                print(f"    - {rejection.raw}: {rejection.reason}")


@app.command()
def schema() -> None:
    """Show the INFO fields the annotator may emit."""
    from varianteffect.effects.emitter import InfoFieldKey

    for key in InfoFieldKey:
        print(f"{key.key_name} (EFF subfield {key.field_index}): {key.description}")

    print(f"\nAvailable annotators: {', '.join(available_annotators())}")


@app.command()
def version() -> None:
    """Show version information."""
    from varianteffect import __version__
    print(f"varianteffect version {__version__}")


if __name__ == "__main__":
    app()
