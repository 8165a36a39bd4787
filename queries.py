# queries.py
import logging

import pandas as pd

from models import ConcurrencyRow

logger = logging.getLogger(__name__)


def _active(emp_df):
    return emp_df[emp_df['termination_date'].isna()]


# --- QUERY 1: ACTIVE STAFF BY LAST NAME ---
# Prefix match on last_name, terminated employees excluded.
def active_by_last_name_prefix(emp_df, prefix, case_sensitive=True):
    """
    SELECT first_name, last_name FROM employees
    WHERE termination_date IS NULL AND last_name LIKE '<prefix>%'
    ORDER BY last_name, first_name;

    Case-sensitive by default. With case_sensitive=False both sides are
    casefolded before comparing.
    """
    if not isinstance(prefix, str):
        raise TypeError(f"prefix must be a string, got {type(prefix).__name__}")

    active = _active(emp_df)
    if case_sensitive:
        mask = active['last_name'].str.startswith(prefix)
    else:
        mask = active['last_name'].str.casefold().str.startswith(prefix.casefold())

    # lexsort on two keys keeps insertion order for identical names
    hits = active[mask].sort_values(['last_name', 'first_name'], kind='stable')
    logger.debug("prefix %r matched %d active employees", prefix, len(hits))
    return list(zip(hits['first_name'], hits['last_name']))


# --- QUERY 2: NEVER REVIEWED ---
# LEFT JOIN employees -> reviews, keep rows with no match.
def never_reviewed(emp_df, rev_df):
    reviewed = rev_df[['employee_id']].drop_duplicates()
    merged = pd.merge(emp_df, reviewed, left_on='id', right_on='employee_id',
                      how='left', indicator=True)
    never = merged[merged['_merge'] == 'left_only'].sort_values('hire_date', kind='stable')
    return [(row.first_name, row.last_name, row.hire_date.date())
            for row in never.itertuples(index=False)]


# --- QUERY 3: ACTIVE HIRE SPAN ---
# MAX(hire_date) - MIN(hire_date) over active employees.
def active_hire_range(emp_df):
    hires = _active(emp_df)['hire_date']
    if hires.empty:
        return None, None
    return hires.min().date(), hires.max().date()


def tenure_span_days(emp_df):
    first, last = active_hire_range(emp_df)
    if first is None:
        return 0
    return (last - first).days


# --- QUERY 4: LONGEST STABILITY PERIOD ---
# Hires and terminations merged into one timeline; LEAD(date) - date.
def staffing_events(emp_df):
    """Every hire and termination as (date, event, employee_id), date ascending."""
    hires = pd.DataFrame({'date': emp_df['hire_date'], 'event': 'Hire',
                          'employee_id': emp_df['id']})
    left = emp_df[emp_df['termination_date'].notna()]
    terms = pd.DataFrame({'date': left['termination_date'], 'event': 'Terminate',
                          'employee_id': left['id']})
    events = pd.concat([hires, terms], ignore_index=True)
    return events.sort_values('date', kind='stable', ignore_index=True)


def longest_stability_period_days(emp_df):
    events = staffing_events(emp_df)
    if len(events) < 2:
        return 0
    gaps = events['date'].diff().dt.days
    return int(gaps.max())


# --- QUERY 5: PEAK HEADCOUNT PER TENURE ---
# Sweep-line over hire / termination dates instead of a pairwise self-join.
def tenure_ends(emp_df, as_of):
    # open tenures run through as_of, but never end before they start
    open_end = emp_df['hire_date'].where(emp_df['hire_date'] > as_of, as_of)
    return emp_df['termination_date'].fillna(open_end)


def headcount_timeline(emp_df, as_of):
    """
    Running headcount at every date it can change.

    Tenures are inclusive on both ends, so a leaver still counts on their
    termination date and drops out the day after. `as_of` closes open
    tenures and is always a point of the timeline. Someone still employed
    but hired after `as_of` counts on their hire day only.
    """
    ends_by_row = tenure_ends(emp_df, as_of)
    hires = pd.DatetimeIndex(emp_df['hire_date']).sort_values()
    ends = pd.DatetimeIndex(ends_by_row).sort_values()

    one_day = pd.Timedelta(days=1)
    drops = emp_df['termination_date'].dropna() + one_day
    late_open = emp_df['termination_date'].isna() & (emp_df['hire_date'] > as_of)
    late_drops = ends_by_row[late_open] + one_day

    dates = pd.DatetimeIndex(
        pd.concat([emp_df['hire_date'], drops, late_drops, pd.Series([as_of])],
                  ignore_index=True)
    ).unique().sort_values()

    hired = hires.searchsorted(dates, side='right')
    gone = ends.searchsorted(dates, side='left')
    return pd.DataFrame({'date': dates, 'headcount': hired - gone})


def max_concurrent_per_tenure(emp_df, as_of):
    timeline = headcount_timeline(emp_df, as_of)
    dates = pd.DatetimeIndex(timeline['date'])
    counts = timeline['headcount'].to_numpy()

    rows = []
    for emp, end in zip(emp_df.itertuples(index=False), tenure_ends(emp_df, as_of)):
        lo = dates.searchsorted(emp.hire_date, side='left')
        hi = dates.searchsorted(end, side='right')
        window = counts[lo:hi]
        peak = int(window.argmax())  # first occurrence
        rows.append(ConcurrencyRow(
            employee_id=int(emp.id),
            first_name=emp.first_name,
            last_name=emp.last_name,
            max_concurrent_count=int(window[peak]),
            first_date_max_reached=dates[lo + peak].date(),
        ))
    logger.debug("computed peak headcount for %d tenures as of %s", len(rows), as_of.date())
    return rows


# --- EXTRA: REVIEW COVERAGE ---
def review_counts(emp_df, rev_df):
    per_employee = rev_df.groupby('employee_id').size()
    out = emp_df[['id', 'first_name', 'last_name']].copy()
    out['review_count'] = out['id'].map(per_employee).fillna(0).astype(int)
    return out.reset_index(drop=True)


def dangling_reviews(emp_df, rev_df):
    # reviews pointing at an employee_id nobody has
    return rev_df[~rev_df['employee_id'].isin(emp_df['id'])].reset_index(drop=True)
