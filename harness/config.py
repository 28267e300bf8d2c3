# harness/config.py
"""
Bench runner settings.

- Env -> KMP_WARMUP_RUNS, KMP_MEASURED_RUNS, KMP_INPUT_FILE, KMP_OUTPUT_FILE
- CLI flags in harness.runner override whatever the environment says.
"""

import os

from pydantic import BaseModel, Field


class BenchConfig(BaseModel):
    warmup_runs: int = Field(3, ge=0)
    measured_runs: int = Field(5, ge=1)
    input_file: str = "sample_input.txt"
    output_file: str = "sample_output.txt"

    @classmethod
    def from_env(cls, **overrides) -> "BenchConfig":
        values = {
            "warmup_runs": os.getenv("KMP_WARMUP_RUNS", "3"),
            "measured_runs": os.getenv("KMP_MEASURED_RUNS", "5"),
            "input_file": os.getenv("KMP_INPUT_FILE", "sample_input.txt"),
            "output_file": os.getenv("KMP_OUTPUT_FILE", "sample_output.txt"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
