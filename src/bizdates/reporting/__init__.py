"""
Reporting module for payment schedules.

Provides:
- AccrualReport: Table of accrual periods with interest amounts
"""

from bizdates.reporting.accrual_report import (
    AccrualEntry,
    AccrualReport,
    generate_accrual_report,
)

__all__ = [
    "AccrualEntry",
    "AccrualReport",
    "generate_accrual_report",
]
