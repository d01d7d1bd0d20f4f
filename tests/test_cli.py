"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from varianteffect.cli import app

runner = CliRunner()

MISSENSE_ENTRY = "NON_SYNONYMOUS_CODING(HIGH|MISSENSE|aTg/aCg|M1T|GENE1|protein_coding|CODING|TX1|EX1)"
INTRON_ENTRY = "INTRON(MODIFIER||||GENE2|processed_transcript|NON_CODING|TX3|)"


@pytest.fixture
def input_data(snpeff_header):
    return {
        "header": snpeff_header,
        "candidates": [
            {
                "chrom": "1",
                "pos": 69270,
                "ref": "A",
                "alts": ["G"],
                "info": {"EFF": [INTRON_ENTRY, "BROKEN", MISSENSE_ENTRY]},
            },
        ],
        "variants": [
            {"chrom": "1", "pos": 69270, "ref": "A", "alts": ["G"]},
            {"chrom": "1", "pos": 70000, "ref": "C", "alts": ["T"]},
        ],
    }


@pytest.fixture
def input_file(tmp_path, input_data):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(input_data))
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("VARIANTEFFECT_SUPPORTED_VERSIONS", "VARIANTEFFECT_TRACK_NAME", "VARIANTEFFECT_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)


class TestAnnotateCommand:
    """Tests for the annotate command."""

    def test_writes_output_file(self, tmp_path, input_file, snpeff_header):
        """Test a full run written to a file."""
        output = tmp_path / "out.json"

        result = runner.invoke(app, ["annotate", str(input_file), "-o", str(output), "--no-log"])

        assert result.exit_code == 0, result.output
        assert "Annotated 1/2 variants" in result.output
        assert "Downsampling Settings: No downsampling" in result.output

        data = json.loads(output.read_text())
        assert data["header"] == [
            {"key": "OriginalSnpEffVersion", "value": snpeff_header["SnpEffVersion"]},
            {"key": "OriginalSnpEffCmd", "value": snpeff_header["SnpEffCmd"]},
        ]
        assert len(data["info_fields"]) == 9
        assert data["variants"][0]["annotations"]["SNPEFF_EFFECT"] == "NON_SYNONYMOUS_CODING"
        assert data["variants"][1]["annotations"] is None

    def test_threaded_run(self, tmp_path, input_file):
        """Test that worker threads give the same output."""
        output = tmp_path / "out.json"

        result = runner.invoke(app, ["annotate", str(input_file), "-o", str(output), "--no-log", "-w", "2"])

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text())["variants"][0]["annotations"]["SNPEFF_GENE_NAME"] == "GENE1"

    def test_unsupported_version_exits(self, input_file):
        """Test that a failed header check aborts with status 1."""
        result = runner.invoke(
            app, ["annotate", str(input_file), "--no-log", "--supported-version", "4.3"]
        )

        assert result.exit_code == 1
        assert "not currently supported" in result.output

    def test_missing_input(self, tmp_path):
        """Test that a missing input file aborts with status 1."""
        result = runner.invoke(app, ["annotate", str(tmp_path / "nope.json"), "--no-log"])

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_invalid_json(self, tmp_path):
        """Test that an unparseable input file aborts with status 1."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        result = runner.invoke(app, ["annotate", str(path), "--no-log"])

        assert result.exit_code == 1
        assert "Input file is not valid JSON" in result.output

    @pytest.mark.parametrize(
        "field,value",
        [
            ("header", ["x"]),
            ("candidates", ["not a record"]),
            ("candidates", [{"chrom": "1", "pos": 5, "ref": "A", "alts": ["G"], "info": ["EFF"]}]),
            ("candidates", [{"chrom": "1", "pos": 5, "ref": "A", "alts": ["G"], "effects": [None]}]),
        ],
    )
    def test_malformed_track(self, tmp_path, input_data, field, value):
        """Test that a badly shaped SnpEff track aborts with status 1."""
        input_data[field] = value
        path = tmp_path / "input.json"
        path.write_text(json.dumps(input_data))

        result = runner.invoke(app, ["annotate", str(path), "--no-log"])

        assert result.exit_code == 1
        assert "Invalid SnpEff track in input" in result.output

    def test_malformed_variant(self, tmp_path, input_data):
        """Test that a variant entry that is not an object aborts with status 1."""
        input_data["variants"] = ["1:69270"]
        path = tmp_path / "input.json"
        path.write_text(json.dumps(input_data))

        result = runner.invoke(app, ["annotate", str(path), "--no-log"])

        assert result.exit_code == 1
        assert "Invalid variant record" in result.output

    def test_downsampling_incompatible_with_locus_traversal(self, input_file):
        """Test that ALL_READS to-coverage is refused for per-locus annotation."""
        result = runner.invoke(
            app,
            [
                "annotate",
                str(input_file),
                "--no-log",
                "--downsampling-type",
                "ALL_READS",
                "--downsample-to-coverage",
                "10",
            ],
        )

        assert result.exit_code == 1
        assert "ALL_READS" in result.output

    def test_downsampling_help_says_report_only(self):
        """Test that the downsampling options document that reads are not downsampled."""
        import inspect

        from varianteffect.cli import annotate

        parameters = inspect.signature(annotate).parameters
        for name in ("downsampling_type", "downsample_to_coverage", "downsample_to_fraction", "use_legacy_downsampler"):
            assert "validated and reported only" in parameters[name].default.help

    def test_unknown_annotator(self, input_file):
        """Test that an unregistered annotator aborts with status 1."""
        result = runner.invoke(app, ["annotate", str(input_file), "--no-log", "--annotator", "vep"])

        assert result.exit_code == 1
        assert "Unknown annotator" in result.output

    def test_downsampling_options(self, tmp_path, input_file):
        """Test that downsampling settings are validated and reported."""
        output = tmp_path / "out.json"

        result = runner.invoke(
            app,
            ["annotate", str(input_file), "-o", str(output), "--no-log", "--downsample-to-coverage", "250"],
        )

        assert result.exit_code == 0, result.output
        assert "Method: BY_SAMPLE, Target Coverage: 250" in result.output

    def test_invalid_downsampling(self, input_file):
        """Test that conflicting downsampling targets abort with status 1."""
        result = runner.invoke(
            app,
            [
                "annotate",
                str(input_file),
                "--no-log",
                "--downsample-to-coverage",
                "250",
                "--downsample-to-fraction",
                "0.5",
            ],
        )

        assert result.exit_code == 1
        assert "Invalid settings" in result.output

    def test_decision_log_written(self, tmp_path, input_file):
        """Test that --log-dir produces a JSONL decision log."""
        log_dir = tmp_path / "logs"
        output = tmp_path / "out.json"

        result = runner.invoke(app, ["annotate", str(input_file), "-o", str(output), "--log-dir", str(log_dir)])

        assert result.exit_code == 0, result.output
        log_files = list(log_dir.glob("effect_decisions_*.jsonl"))
        assert len(log_files) == 1

        from varianteffect.utils.logging_config import reset_logger

        reset_logger()
        event_types = [json.loads(line)["event_type"] for line in log_files[0].read_text().splitlines()]
        assert event_types[0] == "run_start"
        assert "effect_rejected" in event_types
        assert "effect_selected" in event_types
        assert event_types[-1] == "run_summary"


class TestOtherCommands:
    """Tests for check-header, explain, schema and version."""

    def test_check_header(self, input_file):
        """Test a passing header check."""
        result = runner.invoke(app, ["check-header", str(input_file)])

        assert result.exit_code == 0, result.output
        assert "SnpEff header OK" in result.output
        assert "##OriginalSnpEffVersion=" in result.output

    def test_check_header_missing_command_line(self, tmp_path, input_data):
        """Test a failing header check."""
        del input_data["header"]["SnpEffCmd"]
        path = tmp_path / "input.json"
        path.write_text(json.dumps(input_data))

        result = runner.invoke(app, ["check-header", str(path)])

        assert result.exit_code == 1
        assert "SnpEffCmd" in result.output

    def test_explain(self, input_file):
        """Test the ranked listing for one locus."""
        result = runner.invoke(app, ["explain", str(input_file), "1", "69270"])

        assert result.exit_code == 0, result.output
        assert "1. NON_SYNONYMOUS_CODING | HIGH | MISSENSE | CODING | GENE1" in result.output
        assert "2. INTRON | MODIFIER | NONE | NON_CODING | GENE2" in result.output
        assert "Rejected (1):" in result.output
        assert "BROKEN: Malformed SnpEff effect field" in result.output

    def test_explain_unknown_locus(self, input_file):
        """Test explaining a locus without variants."""
        result = runner.invoke(app, ["explain", str(input_file), "2", "1"])

        assert result.exit_code == 1
        assert "No variant at 2:1" in result.output

    def test_schema(self):
        """Test the schema listing."""
        result = runner.invoke(app, ["schema"])

        assert result.exit_code == 0
        assert "SNPEFF_EFFECT (EFF subfield -1)" in result.output
        assert "SNPEFF_EXON_ID (EFF subfield 8)" in result.output
        assert "Available annotators: snpeff" in result.output

    def test_version(self):
        """Test the version command."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "varianteffect version 0.1.0" in result.output
