"""
Write a synthetic heart-failure CSV with the same columns as the real
cleaned dataset, for local runs without the real data.

    python scripts/mock_dataset.py [n_rows]
"""
import sys
from pathlib import Path

import numpy as np
import pandas as pd

n_rows = int(sys.argv[1]) if len(sys.argv) > 1 else 299
rng = np.random.default_rng(7)

sex = rng.integers(0, 2, size=n_rows)
death = rng.binomial(1, 0.32, size=n_rows)

df = pd.DataFrame(
    {
        "age": rng.integers(40, 96, size=n_rows),
        "anaemia": rng.integers(0, 2, size=n_rows),
        "creatinine_phosphokinase": rng.integers(23, 7862, size=n_rows),
        "diabetes": rng.integers(0, 2, size=n_rows),
        "ejection_fraction": rng.integers(14, 81, size=n_rows),
        "high_blood_pressure": rng.integers(0, 2, size=n_rows),
        "platelets": np.round(rng.normal(263000, 97000, size=n_rows).clip(25000, 850000), 2),
        "serum_creatinine": np.round(rng.gamma(4.0, 0.35, size=n_rows).clip(0.5, 9.4), 1),
        "serum_sodium": rng.integers(113, 149, size=n_rows),
        "sex": sex,
        "smoking": rng.integers(0, 2, size=n_rows),
        "time": rng.integers(4, 286, size=n_rows),
        "DEATH_EVENT": death,
        "sex_label": np.where(sex == 1, "Male", "Female"),
        "death_label": np.where(death == 1, "Died", "Survived"),
    }
)

out = Path("data") / "heart_failure_clinical_records_dataset_cleaned.csv"
out.parent.mkdir(exist_ok=True)
df.to_csv(out, index=False)
print("wrote", out, df.shape)
