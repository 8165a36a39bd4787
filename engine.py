"""
AnalyticsEngine: the five case-study questions over a fixed
employee / annual-review dataset.

The engine loads both tables once into pandas DataFrames and never
writes to them again, so every query is a pure read and calling one
twice gives the same answer. Reviews may reference employee ids that
do not exist; those rows are kept and simply never match.
"""
import logging

import queries
from data_loader import build_employee_frame, build_review_frame, parse_date

logger = logging.getLogger(__name__)


class AnalyticsEngine:
    def __init__(self, employees, reviews):
        self._employees = build_employee_frame(employees)
        self._reviews = build_review_frame(reviews)
        logger.info(
            "Loaded %d employees and %d reviews (%d dangling)",
            len(self._employees),
            len(self._reviews),
            len(queries.dangling_reviews(self._employees, self._reviews)),
        )

    @property
    def employees(self):
        """Copy of the employee table."""
        return self._employees.copy()

    @property
    def reviews(self):
        """Copy of the review table."""
        return self._reviews.copy()

    def find_active_by_last_name_prefix(self, prefix, case_sensitive=True):
        """
        (first_name, last_name) of active employees whose last name starts
        with `prefix`, ordered by last name then first name.

        Matching is case-sensitive unless `case_sensitive=False`.
        An empty prefix matches every active employee.
        """
        return queries.active_by_last_name_prefix(self._employees, prefix, case_sensitive)

    def find_never_reviewed(self):
        """(first_name, last_name, hire_date) of employees with no review, by hire date."""
        return queries.never_reviewed(self._employees, self._reviews)

    def tenure_span_days(self):
        """Days between the earliest and latest hire among active employees."""
        return queries.tenure_span_days(self._employees)

    def active_hire_range(self):
        """The (min, max) hire dates behind tenure_span_days(); (None, None) if nobody is active."""
        return queries.active_hire_range(self._employees)

    def longest_stability_period_days(self):
        """Longest gap in days between two consecutive hire/termination events."""
        return queries.longest_stability_period_days(self._employees)

    def max_concurrent_employees_per_tenure(self, as_of):
        """
        For each employee, the largest headcount seen during their tenure
        and the first date it was reached.

        Open tenures run through `as_of` (a date or YYYY-MM-DD string).
        Rows come back in the order employees were loaded.
        """
        return queries.max_concurrent_per_tenure(self._employees, self._as_of(as_of))

    def headcount_timeline(self, as_of):
        """DataFrame of (date, headcount) at every date the headcount can change."""
        return queries.headcount_timeline(self._employees, self._as_of(as_of))

    def review_counts(self):
        """DataFrame of review counts per employee, zero for the never reviewed."""
        return queries.review_counts(self._employees, self._reviews)

    def dangling_reviews(self):
        """DataFrame of reviews whose employee_id matches no employee."""
        return queries.dangling_reviews(self._employees, self._reviews)

    @staticmethod
    def _as_of(value):
        return parse_date(value, "as_of")
