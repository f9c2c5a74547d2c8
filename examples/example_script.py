"""Run the standard sample pipelines on synthetic measurements.

Writes measurements.csv and the four frequency polygons into ./example_output.
"""

from pathlib import Path

import numpy as np
import pandas as pd

from procstats.config import RunConfig
from procstats.pipeline import run
from procstats.utils.logging import configure_logging

configure_logging(level="INFO")

out_dir = Path("example_output")
out_dir.mkdir(exist_ok=True)

rng = np.random.default_rng(0)
power = np.round(rng.normal(loc=50.0, scale=4.0, size=200), 1)
csv_path = out_dir / "measurements.csv"
pd.DataFrame({"time": np.arange(len(power)), "power": power}).to_csv(csv_path, index=False)

report, results = run(RunConfig(input_path=csv_path, output_dir=out_dir, html=True))
print(report)
for r in results:
    print(r.spec.name, [str(p) for p in r.charts])
