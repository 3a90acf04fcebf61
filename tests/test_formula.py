from datetime import date

import pytest

from config.params import MSG_INVALID_INPUT
from config.params import ValuationInputs
from core.valuation.formula import InvalidInputError
from core.valuation.formula import compute_valuation
from core.valuation.formula import compute_valuation_for
from core.valuation.formula import validate_inputs


def _inputs(revenue=1000.0, investment=0.0, cash=0.0, fixed_assets=0.0,
            calc_date=date(2024, 3, 10)) -> ValuationInputs:
    return ValuationInputs(
        revenue=revenue,
        investment=investment,
        cash=cash,
        fixed_assets=fixed_assets,
        calc_date=calc_date,
    )


class TestComputeValuation:
    """Tests for the valuation formula."""

    def test_revenue_only(self):
        assert compute_valuation(1000, 0, 0, 0) == pytest.approx(4500)

    def test_all_components(self):
        assert compute_valuation(1000, 500, 200, 100) == pytest.approx(5300)

    def test_revenue_multiplier(self):
        assert compute_valuation(123456.78, 0, 0, 0) == pytest.approx(
            123456.78 * 4.5)

    def test_other_fields_add_linearly(self):
        base = compute_valuation(2000, 0, 0, 0)
        assert compute_valuation(2000, 10, 20, 30) == pytest.approx(base + 60)


class TestValidateInputs:
    """Tests for input validation."""

    def test_valid_inputs_pass(self):
        validate_inputs(_inputs())

    def test_zero_other_fields_are_allowed(self):
        validate_inputs(_inputs(investment=0, cash=0, fixed_assets=0))

    @pytest.mark.parametrize("revenue", [0.0, -1.0])
    def test_revenue_must_be_positive(self, revenue):
        with pytest.raises(InvalidInputError):
            validate_inputs(_inputs(revenue=revenue, investment=500))

    @pytest.mark.parametrize("field", ["investment", "cash", "fixed_assets"])
    def test_negative_fields_are_rejected(self, field):
        with pytest.raises(InvalidInputError):
            validate_inputs(_inputs(**{field: -1.0}))

    def test_missing_date_is_rejected(self):
        with pytest.raises(InvalidInputError):
            validate_inputs(_inputs(calc_date=None))

    def test_error_carries_user_message(self):
        with pytest.raises(InvalidInputError, match="insira valores válidos") as e:
            validate_inputs(_inputs(revenue=0))
        assert e.value.message == MSG_INVALID_INPUT

    def test_error_is_value_error(self):
        assert issubclass(InvalidInputError, ValueError)


def test_compute_valuation_for_validates_first():
    assert compute_valuation_for(
        _inputs(investment=500, cash=200, fixed_assets=100)) == pytest.approx(5300)
    with pytest.raises(InvalidInputError):
        compute_valuation_for(_inputs(cash=-5))
