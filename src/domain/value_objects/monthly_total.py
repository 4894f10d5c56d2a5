"""Monthly transaction totals read model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, kw_only=True)
class MonthlyTotal:
    """Money in, money out and net for one calendar month.

    Attributes:
        year: Calendar year.
        month: Calendar month (1-12).
        total_in: Sum of credit-classified amounts.
        total_out: Sum of debit-classified amounts.
        net_amount: Signed sum (credit positive, debit negative).
    """

    year: int
    month: int
    total_in: Decimal
    total_out: Decimal
    net_amount: Decimal
