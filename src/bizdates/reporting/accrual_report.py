"""
Accrual reporting for payment schedules.

Turns a schedule into a table of accrual periods with the interest accrued
on a notional at a fixed rate.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List
import json
import numpy as np

from bizdates.core.schedule import Schedule


@dataclass
class AccrualEntry:
    """
    One accrual period.

    Attributes:
        period_start: Adjusted accrual start
        period_end: Adjusted accrual end
        payment_date: Adjusted payment date
        year_fraction: Accrual fraction under the schedule day count
        interest: notional * rate * year_fraction
        is_stub: Irregular first period
    """

    period_start: date
    period_end: date
    payment_date: date
    year_fraction: float
    interest: float
    is_stub: bool = False


@dataclass
class AccrualReport:
    """Accrual table with totals."""

    notional: float
    rate: float
    day_count: str
    entries: List[AccrualEntry] = field(default_factory=list)

    @property
    def total_year_fraction(self) -> float:
        return float(np.sum([e.year_fraction for e in self.entries]))

    @property
    def total_interest(self) -> float:
        return float(np.sum([e.interest for e in self.entries]))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize report to dictionary."""
        return {
            "notional": self.notional,
            "rate": self.rate,
            "day_count": self.day_count,
            "total_year_fraction": self.total_year_fraction,
            "total_interest": self.total_interest,
            "entries": [
                {
                    "period_start": e.period_start.isoformat(),
                    "period_end": e.period_end.isoformat(),
                    "payment_date": e.payment_date.isoformat(),
                    "year_fraction": e.year_fraction,
                    "interest": e.interest,
                    "is_stub": e.is_stub,
                }
                for e in self.entries
            ],
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def print_summary(self) -> None:
        """Print formatted accrual table to console."""
        print(f"\n{'='*78}")
        print(f"ACCRUAL REPORT  notional={self.notional:,.2f}  rate={self.rate:.4%}  dc={self.day_count}")
        print(f"{'='*78}")
        print(f"{'#':>3} {'Start':>12} {'End':>12} {'Payment':>12} {'YearFrac':>10} {'Interest':>16}")
        print("-" * 78)
        for i, e in enumerate(self.entries, 1):
            stub = " stub" if e.is_stub else ""
            print(
                f"{i:>3} {e.period_start.isoformat():>12} {e.period_end.isoformat():>12} "
                f"{e.payment_date.isoformat():>12} {e.year_fraction:>10.6f} {e.interest:>16,.2f}{stub}"
            )
        print("-" * 78)
        print(f"{'TOTAL':<42} {self.total_year_fraction:>10.6f} {self.total_interest:>16,.2f}")
        print(f"{'='*78}\n")


def generate_accrual_report(
    schedule: Schedule,
    notional: float,
    rate: float
) -> AccrualReport:
    """
    Build an accrual report from a schedule.

    Args:
        schedule: Adjusted schedule with filled accrual periods
        notional: Principal amount
        rate: Simple annual rate (e.g., 0.05 for 5%)

    Returns:
        AccrualReport with one entry per schedule date
    """
    fractions = schedule.year_fractions
    interest = notional * rate * fractions

    entries = [
        AccrualEntry(
            period_start=d.period_start,
            period_end=d.period_end,
            payment_date=d.adjusted_date,
            year_fraction=float(yf),
            interest=float(amount),
            is_stub=d.is_stub,
        )
        for d, yf, amount in zip(schedule.dates, fractions, interest)
    ]

    return AccrualReport(
        notional=notional,
        rate=rate,
        day_count=schedule.day_count.value,
        entries=entries,
    )
