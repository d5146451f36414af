import pytest

from dm_transpiler.domain.services.transformers.age import (
    NO_AGE,
    compute_age,
    is_plausible_age,
)


class TestComputeAge:
    def test_birthday_not_yet_reached(self):
        result = compute_age("1990-05-15", "2023-01-01")

        assert result.years == 32
        assert result.unit == "YEARS"
        assert result.computed

    def test_birthday_reached_on_the_day(self):
        assert compute_age("1990-05-15", "2023-05-15").years == 33

    def test_day_before_birthday(self):
        assert compute_age("1990-05-15", "2023-05-14").years == 32

    def test_mixed_source_layouts(self):
        assert compute_age("03/22/1972", "2023-03-10").years == 50
        assert compute_age("10JAN1985", "2023-02-01").years == 38

    @pytest.mark.parametrize(
        ("reference", "expected"),
        [("2023-02-28", 22), ("2023-03-01", 23), ("2024-02-29", 24)],
    )
    def test_leap_day_birthday(self, reference: str, expected: int):
        assert compute_age("2000-02-29", reference).years == expected

    @pytest.mark.parametrize(
        ("birth", "reference"),
        [("", "2023-01-01"), ("1990-05-15", ""), ("garbage", "2023-01-01")],
    )
    def test_missing_inputs_give_no_age(self, birth: str, reference: str):
        result = compute_age(birth, reference)

        assert result == NO_AGE
        assert result.years is None
        assert result.unit == ""
        assert not result.computed


class TestIsPlausibleAge:
    @pytest.mark.parametrize("years", [0, 18, 125])
    def test_in_range(self, years: int):
        assert is_plausible_age(years)

    @pytest.mark.parametrize("years", [-1, 126, 200])
    def test_out_of_range(self, years: int):
        assert not is_plausible_age(years)
