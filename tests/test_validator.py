"""Tests for EFF entry validation."""

import pytest
from pydantic import ValidationError

from varianteffect.effects.validator import validate_effect
from varianteffect.models.effect import EffectParseResult
from varianteffect.models.vocabulary import (
    EffectCoding,
    EffectFunctionalClass,
    EffectImpact,
    EffectType,
)


def fields(*values):
    return list(values)


CLEAN_FIELDS = fields("HIGH", "MISSENSE", "aTg/aCg", "M1T", "GENE1", "protein_coding", "CODING", "TX1", "EX1")


class TestCleanEntries:
    """Tests for nine-field entries."""

    def test_all_fields_recovered(self):
        """Test that every populated field comes back unchanged."""
        result = validate_effect("NON_SYNONYMOUS_CODING", CLEAN_FIELDS)

        assert result.is_well_formed
        assert result.parse_error is None
        effect = result.effect
        assert effect.effect_type == EffectType.NON_SYNONYMOUS_CODING
        assert effect.impact == EffectImpact.HIGH
        assert effect.functional_class == EffectFunctionalClass.MISSENSE
        assert effect.codon_change == "aTg/aCg"
        assert effect.amino_acid_change == "M1T"
        assert effect.gene_name == "GENE1"
        assert effect.gene_biotype == "protein_coding"
        assert effect.coding == EffectCoding.CODING
        assert effect.transcript_id == "TX1"
        assert effect.exon_id == "EX1"

    def test_raw_rebuilt_when_not_given(self):
        """Test the reported raw text when only name and fields are supplied."""
        result = validate_effect("NON_SYNONYMOUS_CODING", CLEAN_FIELDS)
        assert result.raw == "NON_SYNONYMOUS_CODING(HIGH|MISSENSE|aTg/aCg|M1T|GENE1|protein_coding|CODING|TX1|EX1)"

    def test_blank_functional_class_defaults_to_none(self):
        """Test that a blank functional class is NONE, not an error."""
        result = validate_effect("INTRON", fields("MODIFIER", "", "", "", "GENE2", "", "NON_CODING", "TX3", ""))

        assert result.is_well_formed
        assert result.effect.functional_class == EffectFunctionalClass.NONE

    def test_whitespace_functional_class_counts_as_blank(self):
        """Test that a whitespace-only functional class is treated as blank."""
        result = validate_effect("INTRON", fields("MODIFIER", "  ", "", "", "", "", "", "", ""))
        assert result.effect.functional_class == EffectFunctionalClass.NONE

    def test_blank_coding_defaults_to_unknown(self):
        """Test that a blank coding field is UNKNOWN, not an error."""
        result = validate_effect("UPSTREAM", fields("MODIFIER", "", "", "", "GENE2", "", "", "TX3", ""))

        assert result.is_well_formed
        assert result.effect.coding == EffectCoding.UNKNOWN

    def test_empty_free_text_fields_allowed(self):
        """Test that empty codon/gene/transcript fields do not fail validation."""
        result = validate_effect("INTERGENIC", fields("MODIFIER", "", "", "", "", "", "", "", ""))

        assert result.is_well_formed
        assert result.effect.gene_name == ""
        assert result.effect.exon_id == ""


class TestWarningsAndErrors:
    """Tests for SnpEff warnings and errors appended to the metadata."""

    def test_ten_fields_quote_last_field(self):
        """Test that a single warning or error is reported verbatim."""
        metadata = CLEAN_FIELDS + ["WARNING_TRANSCRIPT_INCOMPLETE"]
        result = validate_effect("NON_SYNONYMOUS_CODING", metadata)

        assert not result.is_well_formed
        assert result.effect is None
        assert result.parse_error == (
            'SnpEff issued the following warning or error: "WARNING_TRANSCRIPT_INCOMPLETE"'
        )

    def test_eleven_fields_quote_warning_and_error(self):
        """Test that both warning (second-to-last) and error (last) are reported."""
        metadata = CLEAN_FIELDS + ["WARNING_TRANSCRIPT_NO_START_CODON", "ERROR_CHROMOSOME_NOT_FOUND"]
        result = validate_effect("NON_SYNONYMOUS_CODING", metadata)

        assert not result.is_well_formed
        assert "WARNING_TRANSCRIPT_NO_START_CODON" in result.parse_error
        assert "ERROR_CHROMOSOME_NOT_FOUND" in result.parse_error
        assert result.parse_error.startswith("SnpEff issued the following warning:")

    @pytest.mark.parametrize("count", [0, 1, 8, 12])
    def test_other_counts_report_expected_and_actual(self, count):
        """Test the message for field counts outside 9-11."""
        result = validate_effect("NON_SYNONYMOUS_CODING", ["x"] * count)

        assert not result.is_well_formed
        assert result.parse_error == (
            f"Wrong number of effect metadata fields. Expected 9 but found {count}"
        )

    def test_ten_fields_are_not_extracted(self):
        """Test that fields are not read when SnpEff flagged the entry, even if valid."""
        metadata = fields("BOGUS", "", "", "", "", "", "", "", "", "ERROR_OUT_OF_CHROMOSOME_RANGE")
        result = validate_effect("NON_SYNONYMOUS_CODING", metadata)

        # The impact is never looked at, so only the SnpEff message is reported
        assert "ERROR_OUT_OF_CHROMOSOME_RANGE" in result.parse_error
        assert "BOGUS" not in result.parse_error


class TestVocabularyFailures:
    """Tests for unrecognized vocabulary tokens."""

    def test_unknown_effect_type(self):
        """Test rejection of unknown effect names."""
        result = validate_effect("EXTRATERRESTRIAL", CLEAN_FIELDS)

        assert not result.is_well_formed
        assert result.parse_error == "EXTRATERRESTRIAL is not a recognized effect type"

    def test_unknown_impact(self):
        """Test rejection of unknown impacts."""
        metadata = ["CATASTROPHIC"] + CLEAN_FIELDS[1:]
        result = validate_effect("STOP_GAINED", metadata)
        assert result.parse_error == "Unrecognized value for effect impact: CATASTROPHIC"

    def test_unknown_functional_class(self):
        """Test rejection of unknown functional classes."""
        metadata = list(CLEAN_FIELDS)
        metadata[1] = "SILLY"
        result = validate_effect("STOP_GAINED", metadata)
        assert result.parse_error == "Unrecognized value for effect functional class: SILLY"

    def test_unknown_coding(self):
        """Test rejection of unknown coding values."""
        metadata = list(CLEAN_FIELDS)
        metadata[6] = "SORT_OF_CODING"
        result = validate_effect("STOP_GAINED", metadata)
        assert result.parse_error == "Unrecognized value for effect coding: SORT_OF_CODING"

    def test_first_error_wins_over_structure(self):
        """Test that an unknown name is reported ahead of a later field-count error."""
        result = validate_effect("EXTRATERRESTRIAL", ["x"] * 4)
        assert result.parse_error == "EXTRATERRESTRIAL is not a recognized effect type"

    def test_first_error_wins_over_later_fields(self):
        """Test that only the first of several field errors is kept."""
        metadata = list(CLEAN_FIELDS)
        metadata[0] = "BAD_IMPACT"
        metadata[1] = "BAD_CLASS"
        metadata[6] = "BAD_CODING"
        result = validate_effect("STOP_GAINED", metadata)

        assert result.parse_error == "Unrecognized value for effect impact: BAD_IMPACT"
        assert "BAD_CLASS" not in result.parse_error
        assert "BAD_CODING" not in result.parse_error


class TestEffectParseResult:
    """Tests for the parse result invariant."""

    def test_requires_exactly_one_outcome(self):
        """Test that a result cannot be both or neither."""
        with pytest.raises(ValidationError):
            EffectParseResult(raw="X()")

    def test_is_immutable(self):
        """Test that results cannot be modified after construction."""
        result = validate_effect("NON_SYNONYMOUS_CODING", CLEAN_FIELDS)
        with pytest.raises(ValidationError):
            result.parse_error = "changed"
