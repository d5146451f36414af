import pandas as pd
import pytest

from dm_transpiler.domain.services.transformers.codelist import (
    NOT_ASSIGNED,
    map_sex,
    map_treatment,
)


class TestMapSex:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Male", "M"),
            ("FEMALE", "F"),
            ("", "U"),
            ("xyz", "U"),
            ("m", "M"),
            (" f ", "F"),
            (None, "U"),
        ],
    )
    def test_mapping(self, raw: object, expected: str):
        assert map_sex(raw) == expected

    @pytest.mark.parametrize("raw", ["Male", "unknown", "0", "N/A", "FEMALE "])
    def test_result_is_always_a_controlled_value(self, raw: str):
        assert map_sex(raw) in {"M", "F", "U"}


class TestMapTreatment:
    def test_placebo(self):
        arm = map_treatment("Placebo")

        assert arm.code == "PLACEBO"
        assert arm.label == "Placebo"
        assert arm.assigned
        assert arm.recognized

    @pytest.mark.parametrize("raw", ["DRUG_A", "Drug_A", "drug_a"])
    def test_lookup_ignores_case(self, raw: str):
        arm = map_treatment(raw)

        assert (arm.code, arm.label) == ("TRTA", "Drug A")

    def test_drug_b(self):
        arm = map_treatment("Drug_B")

        assert (arm.code, arm.label) == ("TRTB", "Drug B")

    def test_empty_code_is_not_assigned_but_not_unknown(self):
        arm = map_treatment("")

        assert arm is NOT_ASSIGNED
        assert arm.code == ""
        assert arm.label == ""
        assert arm.not_assigned_reason == "NOT ASSIGNED"
        assert arm.recognized

    def test_unrecognized_code(self):
        arm = map_treatment("DRUG_X")

        assert arm.code == ""
        assert arm.label == ""
        assert arm.not_assigned_reason == "NOT ASSIGNED"
        assert not arm.assigned
        assert not arm.recognized

    @pytest.mark.parametrize("raw", ["NONE", "null", "NaN"])
    def test_na_marker_text_is_an_unrecognized_code(self, raw: str):
        arm = map_treatment(raw)

        assert not arm.assigned
        assert not arm.recognized

    @pytest.mark.parametrize("raw", [None, pd.NA, float("nan")])
    def test_missing_scalar_is_not_assigned(self, raw: object):
        assert map_treatment(raw) is NOT_ASSIGNED
