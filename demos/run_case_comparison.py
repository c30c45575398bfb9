# File: demos/run_case_comparison.py
"""
DEMO: COMPARING DESIGN CASES
============================

Keeps three variants of the default beam side by side (different
supports and sections) and prints the comparison table, the same way a
user would flip between "Design Case 1", "Case 2", ... in the app.
"""

from dataclasses import replace
from pathlib import Path

import pandas as pd

from beamsim.cases import add_case, compare_cases, new_case, update_case
from beamsim.catalog import DEFAULT_BEAM, SECTIONS

OUTPUT_DIR = Path("artifacts")


def main():
    cases = (new_case(case_id='base'),)
    cases = add_case(cases, case_id='ibeam')
    cases = update_case(cases, 'ibeam', replace(DEFAULT_BEAM, section=SECTIONS['ibeam_500']))
    cases = add_case(cases, case_id='cantilever')
    cases = update_case(cases, 'cantilever',
                        replace(DEFAULT_BEAM, support='cantilever', load_position=8.0))

    df = compare_cases(cases)

    pd.set_option('display.width', 140)
    print("Design case comparison")
    print("=" * 60)
    print(df[['name', 'support', 'max_stress', 'max_deflection',
              'safety_factor', 'deflection_ratio', 'deflection_ok']].to_string(index=False))

    OUTPUT_DIR.mkdir(exist_ok=True)
    path = OUTPUT_DIR / "case_comparison.csv"
    df.to_csv(path, index=False)
    print(f"\n✓ Saved {path}")


if __name__ == "__main__":
    main()
