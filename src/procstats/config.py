"""Run configuration.

RunConfig holds everything a single procstats run needs. The CLI builds one
from argparse arguments; library users can build one directly or from a dict.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from procstats.errors import InputFileError, UsageError
from procstats.measurements import DEFAULT_COLUMN, DEFAULT_DELIMITER
from procstats.report import DEFAULT_PRECISION


@dataclass
class RunConfig:
    """Configuration for one run.

    Attributes mirror the command line options.
    """
    input_path: Path
    output_dir: Path = Path(".")
    column: int = DEFAULT_COLUMN          # 0-based field index of the measurement
    delimiter: str = DEFAULT_DELIMITER
    precision: int = DEFAULT_PRECISION    # decimals printed for each statistic
    round_decimals: Optional[int] = None  # None = exact float grouping for frequencies
    charts: bool = True                   # write PNG charts
    html: bool = False                    # also write Plotly HTML charts (needs charts)
    jobs: int = 1                         # >1 runs sample pipelines on a thread pool
    log_level: Optional[str] = None       # None = PROCSTATS_LOG_LEVEL or WARNING

    def validate(self) -> None:
        """Check option values and the output directory.

        Raises:
            UsageError: If an option value is out of range.
            InputFileError: If charts are enabled and output_dir is not a directory.
        """
        if self.column < 0:
            raise UsageError(f"--column must be >= 0, got {self.column}")
        if not self.delimiter:
            raise UsageError("--delimiter must not be empty")
        if self.precision < 0:
            raise UsageError(f"--precision must be >= 0, got {self.precision}")
        if self.round_decimals is not None and self.round_decimals < 0:
            raise UsageError(f"--round-decimals must be >= 0, got {self.round_decimals}")
        if self.jobs < 1:
            raise UsageError(f"--jobs must be >= 1, got {self.jobs}")
        if self.charts and not self.output_dir.is_dir():
            raise InputFileError(f"output directory {str(self.output_dir)!r} does not exist")

    def to_dict(self) -> dict[str, Any]:
        """Serialize RunConfig to a JSON-friendly dictionary."""
        return {
            "input_path": str(self.input_path),
            "output_dir": str(self.output_dir),
            "column": self.column,
            "delimiter": self.delimiter,
            "precision": self.precision,
            "round_decimals": self.round_decimals,
            "charts": self.charts,
            "html": self.html,
            "jobs": self.jobs,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RunConfig":
        """Deserialize RunConfig from a dictionary; missing keys use defaults.

        Raises:
            UsageError: If input_path is missing.
        """
        if not data.get("input_path"):
            raise UsageError("input_path is required")
        round_decimals = data.get("round_decimals")
        return cls(
            input_path=Path(data["input_path"]),
            output_dir=Path(data.get("output_dir") or "."),
            column=int(data.get("column", DEFAULT_COLUMN)),
            delimiter=str(data.get("delimiter", DEFAULT_DELIMITER)),
            precision=int(data.get("precision", DEFAULT_PRECISION)),
            round_decimals=None if round_decimals is None else int(round_decimals),
            charts=bool(data.get("charts", True)),
            html=bool(data.get("html", False)),
            jobs=int(data.get("jobs", 1)),
            log_level=data.get("log_level"),  # Can be None
        )
