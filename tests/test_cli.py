"""命令行测试"""
import pytest
from click.testing import CliRunner

from cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestPaymentCommand:
    def test_monthly_payment(self, runner):
        result = runner.invoke(cli, ["payment", "--principal", "400000", "--rate", "6.5", "--years", "30"])
        assert result.exit_code == 0
        assert "Monthly payment: $2,528.27" in result.output
        assert "Interest rate: 6.500%" in result.output

    def test_with_escrow(self, runner):
        result = runner.invoke(cli, [
            "payment", "--principal", "400000", "--rate", "6.5", "--years", "30",
            "--property-tax", "8000", "--home-insurance", "1200",
        ])
        assert result.exit_code == 0
        assert "Monthly payment: $3,294.94" in result.output
        assert "Principal & interest: $2,528.27" in result.output

    def test_invalid_inputs(self, runner):
        result = runner.invoke(cli, ["payment", "--principal", "0", "--rate", "60", "--years", "30"])
        assert result.exit_code == 1
        assert "Loan amount must be greater than 0" in result.output
        assert "Interest rate must be between 0% and 50%" in result.output

    def test_nan_rate_rejected(self, runner):
        result = runner.invoke(cli, ["payment", "--principal", "400000", "--rate", "nan", "--years", "30"])
        assert result.exit_code == 1
        assert "Interest rate must be a finite number" in result.output

    def test_tiny_rate(self, runner):
        result = runner.invoke(cli, ["payment", "--principal", "400000", "--rate", "1e-15", "--years", "30"])
        assert result.exit_code == 0
        assert "Monthly payment: $1,111.11" in result.output


class TestScheduleCommand:
    def test_csv_to_stdout(self, runner):
        result = runner.invoke(cli, [
            "schedule", "--principal", "100000", "--rate", "5", "--years", "5",
            "--start-date", "2024-01-15",
        ])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0].startswith("Payment #,Date,Principal")
        assert len(lines) == 61
        assert lines[1].startswith("1,2024-02-15,")

    def test_excel_output(self, runner, tmp_path):
        out = tmp_path / "schedule.xlsx"
        result = runner.invoke(cli, [
            "schedule", "--principal", "100000", "--rate", "5", "--years", "5",
            "--output", str(out),
        ])
        assert result.exit_code == 0
        assert "Wrote 60 payments" in result.output
        assert out.read_bytes()[:2] == b"PK"

    def test_fractional_term_rejected(self, runner):
        result = runner.invoke(cli, ["schedule", "--principal", "100000", "--rate", "5", "--years", "2.5"])
        assert result.exit_code == 1
        assert "whole number" in result.output


class TestPaydownCommand:
    def test_savings(self, runner):
        result = runner.invoke(cli, [
            "paydown", "--principal", "350000", "--rate", "7.5", "--years", "25",
            "--extra-monthly", "200",
        ])
        assert result.exit_code == 0
        assert "Time saved:" in result.output
        assert "Time saved: 0 months" not in result.output


class TestRefinanceCommand:
    def test_worthwhile(self, runner):
        result = runner.invoke(cli, [
            "refinance",
            "--current-balance", "350000", "--current-rate", "7.5", "--current-years", "25",
            "--new-amount", "350000", "--new-rate", "6.0", "--new-years", "30",
            "--closing-costs", "5000",
        ])
        assert result.exit_code == 0
        assert "Break-even: 11 months" in result.output
        assert "Refinancing is worthwhile" in result.output
        assert "Payoff (months)" in result.output

    def test_higher_rate(self, runner):
        result = runner.invoke(cli, [
            "refinance",
            "--current-balance", "350000", "--current-rate", "6.0", "--current-years", "25",
            "--new-amount", "350000", "--new-rate", "8.0", "--new-years", "25",
            "--closing-costs", "5000",
        ])
        assert result.exit_code == 0
        assert "Break-even: Never" in result.output
        assert "Refinancing is not worthwhile" in result.output

    def test_negative_closing_costs(self, runner):
        result = runner.invoke(cli, [
            "refinance",
            "--current-balance", "350000", "--current-rate", "7.5", "--current-years", "25",
            "--new-amount", "350000", "--new-rate", "6.0", "--new-years", "30",
            "--closing-costs", "-1",
        ])
        assert result.exit_code == 1
        assert "Closing costs cannot be negative" in result.output
