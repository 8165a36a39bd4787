import logging
import os

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

import sample_data
from data_loader import load_employees_csv, load_reviews_csv
from engine import AnalyticsEngine

# --- CONFIGURATION ---
# Drop your own exports into 'data/' with the same column names.
# If they are missing the built-in case-study rows are used instead.
EMPLOYEES_PATH = 'data/employees.csv'
REVIEWS_PATH = 'data/annual_reviews.csv'
CHART_PATH = 'headcount_over_time.png'
NAME_PREFIX = 'Smith'
REPORT_AS_OF = '2020-01-01'

pd.set_option("display.width", 200)


def load_engine(employees_path=EMPLOYEES_PATH, reviews_path=REVIEWS_PATH):
    if os.path.exists(employees_path) and os.path.exists(reviews_path):
        print(f"Reading {employees_path} and {reviews_path}")
        return AnalyticsEngine(load_employees_csv(employees_path), load_reviews_csv(reviews_path))
    print("Data files not found, using the built-in sample rows.")
    return AnalyticsEngine(sample_data.EMPLOYEES, sample_data.REVIEWS)


def run_analysis(employees_path=EMPLOYEES_PATH, reviews_path=REVIEWS_PATH,
                 chart_path=CHART_PATH, prefix=NAME_PREFIX, as_of=REPORT_AS_OF):
    engine = load_engine(employees_path, reviews_path)
    print(f"--- Staff Analysis as of {as_of} ---")

    # 1. Active staff by last name
    matches = engine.find_active_by_last_name_prefix(prefix)
    print(f"\n--- ACTIVE STAFF NAMED '{prefix}...' ---")
    if matches:
        for first, last in matches:
            print(f"{first} {last}")
    else:
        print("Nobody currently employed matches.")

    # 2. Never reviewed
    print("\n--- NEVER REVIEWED ---")
    never = pd.DataFrame(engine.find_never_reviewed(), columns=['first_name', 'last_name', 'hire_date'])
    print(never.to_string(index=False) if not never.empty else "Everyone has a review.")

    dangling = engine.dangling_reviews()
    if not dangling.empty:
        ids = sorted(dangling['employee_id'].unique().tolist())
        print(f"({len(dangling)} reviews reference unknown employee ids {ids})")

    # 3. Hire span among active staff
    first, last = engine.active_hire_range()
    print("\n--- ACTIVE HIRE SPAN ---")
    print(f"{engine.tenure_span_days()} days ({first} -> {last})")

    # 4. Longest quiet stretch
    print("\n--- LONGEST PERIOD WITHOUT HIRES OR EXITS ---")
    print(f"{engine.longest_stability_period_days()} days")

    # 5. Peak headcount per tenure
    print("\n--- PEAK HEADCOUNT DURING EACH TENURE ---")
    peaks = pd.DataFrame(engine.max_concurrent_employees_per_tenure(as_of))
    print(peaks.to_string(index=False))

    # 6. Chart: headcount over time
    timeline = engine.headcount_timeline(as_of)
    plt.figure(figsize=(10, 5))
    sns.lineplot(data=timeline, x='date', y='headcount', drawstyle='steps-post', color='purple')
    plt.title('Headcount Over Time')
    plt.xlabel('Date')
    plt.ylabel('Employees')
    plt.grid(axis='y', alpha=0.3)
    plt.tight_layout()
    plt.savefig(chart_path)
    plt.close()

    print(f"\nSUCCESS: Created '{chart_path}'")
    return engine


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_analysis()
