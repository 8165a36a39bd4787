"""
Turns employee / review records into the DataFrames the engine queries.

Everything here fails fast with DataError: the dataset is small and
fixed, so a half-loaded engine is never useful.
"""
import logging
import os
from dataclasses import asdict, is_dataclass
from datetime import date

import pandas as pd

from models import AnnualReview, DataError, Employee

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"

# datetime64[ns] bounds; the top stops a day short so a leaver's drop-out day still fits
MIN_DATE = pd.Timestamp.min.ceil("D")
MAX_DATE = pd.Timestamp.max.floor("D") - pd.Timedelta(days=1)

EMPLOYEE_COLUMNS = ["id", "first_name", "last_name", "hire_date", "termination_date", "salary"]
REVIEW_COLUMNS = ["id", "employee_id", "review_date"]


def _out_of_range(field, value):
    return DataError(
        f"{field}: {value} is outside the supported range {MIN_DATE.date()} .. {MAX_DATE.date()}"
    )


def _checked(ts, field):
    if not MIN_DATE <= ts <= MAX_DATE:
        raise _out_of_range(field, ts.date())
    return ts


def parse_date(value, field, required=True):
    """Return `value` as a midnight pd.Timestamp, or None for an allowed blank."""
    if value is None or (not isinstance(value, (str, date)) and pd.isna(value)):
        if required:
            raise DataError(f"{field} is required")
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            if required:
                raise DataError(f"{field} is required")
            return None
        try:
            parsed = pd.to_datetime(value, format=DATE_FORMAT)
        except pd.errors.OutOfBoundsDatetime as exc:
            raise _out_of_range(field, value) from exc
        except (ValueError, TypeError) as exc:
            raise DataError(f"{field}: malformed date {value!r}") from exc
        return _checked(parsed, field)
    if value is pd.NaT:
        if required:
            raise DataError(f"{field} is required")
        return None
    if isinstance(value, date):
        try:
            stamp = pd.Timestamp(value).normalize()
        except pd.errors.OutOfBoundsDatetime as exc:
            raise _out_of_range(field, value) from exc
        return _checked(stamp, field)
    raise DataError(f"{field}: expected a date, got {type(value).__name__}")


def _as_dict(record, columns):
    if is_dataclass(record):
        row = asdict(record)
    elif isinstance(record, dict):
        row = dict(record)
    else:
        raise DataError(f"Unsupported record type: {type(record).__name__}")
    missing = [c for c in columns if c not in row and c not in ("termination_date", "salary")]
    if missing:
        raise DataError(f"Record {row!r} is missing {missing}")
    return row


def _as_int(value, field):
    # int() would read True as 1 and truncate 3.7
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise DataError(f"{field}: expected an integer id, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise DataError(f"{field}: expected an integer id, got {value!r}") from exc


def _as_salary(value, label):
    try:
        salary = float(value or 0)
    except (TypeError, ValueError) as exc:
        raise DataError(f"{label}: salary {value!r} is not a number") from exc
    if salary < 0:
        raise DataError(f"{label}: salary must be non-negative, got {salary}")
    return salary


def _check_unique(ids, table):
    counts = pd.Series(ids, dtype="int64").value_counts()
    dupes = sorted(counts[counts > 1].index.tolist())
    if dupes:
        raise DataError(f"Duplicate {table} ids: {dupes}")


def build_employee_frame(employees):
    rows = []
    for record in employees:
        row = _as_dict(record, EMPLOYEE_COLUMNS)
        emp_id = _as_int(row["id"], "employee id")
        label = f"employee {emp_id}"
        hired = parse_date(row["hire_date"], f"{label} hire_date")
        left = parse_date(row.get("termination_date"), f"{label} termination_date", required=False)
        if left is not None and left < hired:
            raise DataError(
                f"{label}: termination_date {left.date()} is before hire_date {hired.date()}"
            )
        salary = _as_salary(row.get("salary"), label)
        rows.append({
            "id": emp_id,
            "first_name": str(row["first_name"]),
            "last_name": str(row["last_name"]),
            "hire_date": hired,
            "termination_date": left if left is not None else pd.NaT,
            "salary": salary,
        })

    _check_unique([r["id"] for r in rows], "employee")
    df = pd.DataFrame(rows, columns=EMPLOYEE_COLUMNS)
    df["hire_date"] = pd.to_datetime(df["hire_date"]).astype("datetime64[ns]")
    df["termination_date"] = pd.to_datetime(df["termination_date"]).astype("datetime64[ns]")
    return df.astype({"id": "int64", "salary": "float64"})


def build_review_frame(reviews):
    rows = []
    for record in reviews:
        row = _as_dict(record, REVIEW_COLUMNS)
        review_id = _as_int(row["id"], "review id")
        rows.append({
            "id": review_id,
            "employee_id": _as_int(row["employee_id"], f"review {review_id} employee_id"),
            "review_date": parse_date(row["review_date"], f"review {review_id} review_date"),
        })

    _check_unique([r["id"] for r in rows], "review")
    df = pd.DataFrame(rows, columns=REVIEW_COLUMNS)
    df["review_date"] = pd.to_datetime(df["review_date"]).astype("datetime64[ns]")
    return df.astype({"id": "int64", "employee_id": "int64"})


# --- CSV FILES ---

def _read_table(csv_path, columns):
    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"Missing data file: {csv_path}")
    df = pd.read_csv(csv_path, dtype=str)
    df.columns = [str(c).strip().lower() for c in df.columns]
    required = [c for c in columns if c not in ("termination_date", "salary")]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise DataError(f"{csv_path} is missing columns: {missing}")
    for col in df.columns:
        df[col] = df[col].str.strip()
    return df.astype(object).where(df.notna(), None)


def load_employees_csv(csv_path):
    df = _read_table(csv_path, EMPLOYEE_COLUMNS)
    employees = []
    for row in df.to_dict("records"):
        emp_id = _as_int(row["id"], "employee id")
        left = parse_date(row.get("termination_date"), f"employee {emp_id} termination_date", required=False)
        employees.append(Employee(
            id=emp_id,
            first_name=row["first_name"],
            last_name=row["last_name"],
            hire_date=parse_date(row["hire_date"], f"employee {emp_id} hire_date").date(),
            termination_date=left.date() if left is not None else None,
            salary=_as_salary(row.get("salary"), f"employee {emp_id}"),
        ))
    logger.info("Loaded %d employees from %s", len(employees), csv_path)
    return employees


def load_reviews_csv(csv_path):
    df = _read_table(csv_path, REVIEW_COLUMNS)
    reviews = []
    for row in df.to_dict("records"):
        review_id = _as_int(row["id"], "review id")
        reviews.append(AnnualReview(
            id=review_id,
            employee_id=_as_int(row["employee_id"], f"review {review_id} employee_id"),
            review_date=parse_date(row["review_date"], f"review {review_id} review_date").date(),
        ))
    logger.info("Loaded %d reviews from %s", len(reviews), csv_path)
    return reviews
