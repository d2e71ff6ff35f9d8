"""Tests for accrual reporting."""

import json

import pytest
from datetime import date

from bizdates.core.roll import BusinessDayConvention
from bizdates.core.schedule import Schedule, generate_schedule
from bizdates.reporting import AccrualReport, generate_accrual_report


class TestAccrualReport:
    """Tests for generate_accrual_report."""

    def test_annual_interest(self, annual_schedule: Schedule) -> None:
        report = generate_accrual_report(annual_schedule, notional=1_000_000.0, rate=0.05)

        assert isinstance(report, AccrualReport)
        assert len(report.entries) == 2
        assert report.entries[0].interest == pytest.approx(50_000.0)
        assert report.total_interest == pytest.approx(100_000.0)
        assert report.total_year_fraction == pytest.approx(2.0)
        assert report.day_count == "30/360"

    def test_stub_flag_carried(self) -> None:
        sched = generate_schedule(
            date(2023, 1, 1), date(2025, 1, 2), 12,
            convention=BusinessDayConvention.UNADJUSTED,
        )
        report = generate_accrual_report(sched, notional=360.0, rate=1.0)

        assert report.entries[0].is_stub
        assert report.entries[0].interest == pytest.approx(1.0)
        assert report.entries[0].payment_date == date(2023, 1, 2)

    def test_to_json(self, annual_schedule: Schedule) -> None:
        report = generate_accrual_report(annual_schedule, notional=100.0, rate=0.1)
        data = json.loads(report.to_json())

        assert data["total_interest"] == pytest.approx(20.0)
        assert data["entries"][0]["period_start"] == "2023-01-02"
        assert data["entries"][1]["payment_date"] == "2025-01-02"

    def test_empty_schedule(self) -> None:
        report = generate_accrual_report(Schedule(), notional=100.0, rate=0.1)
        assert report.entries == []
        assert report.total_interest == 0.0

    def test_print_summary(self, annual_schedule: Schedule, capsys) -> None:
        generate_accrual_report(annual_schedule, notional=1_000_000.0, rate=0.05).print_summary()

        out = capsys.readouterr().out
        assert "ACCRUAL REPORT" in out
        assert "100,000.00" in out
