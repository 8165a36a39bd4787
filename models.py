from dataclasses import dataclass
from datetime import date
from typing import NamedTuple, Optional


class DataError(ValueError):
    """Raised when the input rows cannot be loaded into an engine."""


@dataclass(frozen=True)
class Employee:
    id: int
    first_name: str
    last_name: str
    hire_date: date
    termination_date: Optional[date] = None
    salary: float = 0.0


@dataclass(frozen=True)
class AnnualReview:
    id: int
    employee_id: int
    review_date: date


class ConcurrencyRow(NamedTuple):
    employee_id: int
    first_name: str
    last_name: str
    max_concurrent_count: int
    first_date_max_reached: date
