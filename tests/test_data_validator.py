"""输入校验测试"""
import pytest

from data_manager.data_validator import (
    validate_extra_payment_policy,
    validate_mortgage_inputs,
    validate_paydown_inputs,
    validate_refinance_inputs,
)
from data_manager.schema import (
    EscrowItems, ExtraPaymentPolicy, LoanParameters, RefinanceCosts, RefinanceInputs,
)

VALID = LoanParameters(principal=400000, annual_rate_percent=6.5, term_years=30)
NAN = float("nan")
INF = float("inf")


def _fields(errors):
    return [e.field for e in errors]


class TestMortgageInputs:
    def test_valid(self):
        assert validate_mortgage_inputs(VALID, EscrowItems(property_tax=8000)) == []

    def test_all_errors_collected(self):
        loan = LoanParameters(principal=-1, annual_rate_percent=60, term_years=0)
        errors = validate_mortgage_inputs(loan)
        assert _fields(errors) == ["principal", "annual_rate_percent", "term_years"]
        assert str(errors[0]) == "Loan amount must be greater than 0"
        assert str(errors[1]) == "Interest rate must be between 0% and 50%"
        assert str(errors[2]) == "Loan term must be between 1 and 50 years"

    @pytest.mark.parametrize("rate", [0, 50])
    def test_rate_bounds_inclusive(self, rate):
        assert validate_mortgage_inputs(LoanParameters(400000, rate, 30)) == []

    @pytest.mark.parametrize("rate", [-0.1, 50.01])
    def test_rate_out_of_range(self, rate):
        assert _fields(validate_mortgage_inputs(LoanParameters(400000, rate, 30))) == ["annual_rate_percent"]

    def test_term_bounds(self):
        assert validate_mortgage_inputs(LoanParameters(400000, 6.5, 50)) == []
        assert _fields(validate_mortgage_inputs(LoanParameters(400000, 6.5, 51))) == ["term_years"]

    def test_fractional_term_rejected(self):
        errors = validate_mortgage_inputs(LoanParameters(400000, 6.5, 2.5))
        assert _fields(errors) == ["term_years"]
        assert "whole number" in str(errors[0])

    def test_loan_amount_cap(self):
        assert validate_mortgage_inputs(LoanParameters(10_000_000, 6.5, 30)) == []
        errors = validate_mortgage_inputs(LoanParameters(10_000_001, 6.5, 30))
        assert _fields(errors) == ["principal"]
        assert str(errors[0]) == "Loan amount must be less than $10,000,000"

    def test_nan_rate(self):
        errors = validate_mortgage_inputs(LoanParameters(400000, NAN, 30))
        assert _fields(errors) == ["annual_rate_percent"]
        assert str(errors[0]) == "Interest rate must be a finite number"

    @pytest.mark.parametrize("term", [NAN, INF])
    def test_non_finite_term_collected(self, term):
        """非有限年限记为错误，不抛 ValueError / OverflowError"""
        errors = validate_mortgage_inputs(LoanParameters(NAN, 6.5, term))
        assert _fields(errors) == ["principal", "term_years"]
        assert str(errors[1]) == "Loan term must be a finite number"

    def test_non_finite_escrow(self):
        errors = validate_mortgage_inputs(VALID, EscrowItems(property_tax=NAN, hoa_fees=INF))
        assert _fields(errors) == ["property_tax", "hoa_fees"]
        assert str(errors[0]) == "Property Tax must be a finite number"

    def test_negative_escrow(self):
        escrow = EscrowItems(property_tax=-1, pmi=-50)
        errors = validate_mortgage_inputs(VALID, escrow)
        assert _fields(errors) == ["property_tax", "pmi"]
        assert str(errors[0]) == "Property Tax cannot be negative"


class TestExtraPaymentPolicy:
    def test_valid(self):
        assert validate_extra_payment_policy(ExtraPaymentPolicy(100, 5000, True)) == []

    def test_negative_amounts(self):
        errors = validate_extra_payment_policy(ExtraPaymentPolicy(-100, -5000, True))
        assert _fields(errors) == ["extra_monthly_amount", "annual_lump_sum"]

    def test_non_finite_amounts(self):
        errors = validate_extra_payment_policy(ExtraPaymentPolicy(NAN, INF, True))
        assert _fields(errors) == ["extra_monthly_amount", "annual_lump_sum"]
        assert str(errors[0]) == "Extra monthly payment must be a finite number"


class TestPaydownInputs:
    def test_no_loan_amount_cap(self):
        loan = LoanParameters(20_000_000, 6.5, 30)
        assert validate_paydown_inputs(loan, ExtraPaymentPolicy(extra_monthly_amount=100)) == []

    def test_nan_term_does_not_raise(self):
        errors = validate_paydown_inputs(LoanParameters(400000, 6.5, NAN), ExtraPaymentPolicy())
        assert _fields(errors) == ["term_years"]

    def test_loan_and_policy_errors(self):
        loan = LoanParameters(0, 6.5, 30)
        errors = validate_paydown_inputs(loan, ExtraPaymentPolicy(extra_monthly_amount=-1))
        assert _fields(errors) == ["principal", "extra_monthly_amount"]


class TestRefinanceInputs:
    def test_valid(self):
        inputs = RefinanceInputs(
            LoanParameters(350000, 7.5, 25),
            LoanParameters(350000, 6.0, 30),
            RefinanceCosts(closing_costs=5000, cash_out=10000),
        )
        assert validate_refinance_inputs(inputs) == []

    def test_no_loan_amount_cap(self):
        inputs = RefinanceInputs(LoanParameters(20_000_000, 7.5, 25), LoanParameters(20_000_000, 6.0, 30))
        assert validate_refinance_inputs(inputs) == []

    def test_prefixed_fields(self):
        inputs = RefinanceInputs(
            LoanParameters(0, 7.5, 25),
            LoanParameters(350000, 75, 30),
            RefinanceCosts(closing_costs=-1, cash_out=-1),
            ExtraPaymentPolicy(annual_lump_sum=-10),
        )
        errors = validate_refinance_inputs(inputs)
        assert _fields(errors) == [
            "current_loan.principal",
            "new_loan.annual_rate_percent",
            "closing_costs",
            "cash_out",
            "annual_lump_sum",
        ]
        assert str(errors[0]) == "Current loan amount must be greater than 0"
        assert str(errors[1]) == "New interest rate must be between 0% and 50%"

    def test_infinite_principal_without_cap(self):
        inputs = RefinanceInputs(LoanParameters(350000, 7.5, 25), LoanParameters(INF, 6.0, 30))
        errors = validate_refinance_inputs(inputs)
        assert _fields(errors) == ["new_loan.principal"]
        assert str(errors[0]) == "New loan amount must be a finite number"

    def test_non_finite_costs(self):
        inputs = RefinanceInputs(
            LoanParameters(350000, 7.5, 25),
            LoanParameters(350000, 6.0, 30),
            RefinanceCosts(closing_costs=INF, cash_out=NAN),
        )
        assert _fields(validate_refinance_inputs(inputs)) == ["closing_costs", "cash_out"]
