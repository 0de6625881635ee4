"""Domain entity for a fixed salary expense line."""

from dataclasses import dataclass


@dataclass
class SalaryExpense:
    """One salary payout; ``description`` usually names the pay period."""

    id: int
    employee_name: str
    date: str
    amount: float
    description: str
