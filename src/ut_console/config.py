"""Configuration for ut-console.

The defaults reproduce the behaviour of the classic `ut` console reporter.
These are the constants the reporter already works with, exposed so a
program embedding the library can override them (e.g. a looser floating
point tolerance). A run needs no configuration at all: the only value read
from the environment is the terminal size.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError


class ReporterConfig(BaseModel):
    """Configuration for a Reporter.

    Attributes:
        label_ratio: Share of the terminal width used for the test label.
        default_columns: Width used when the terminal size is unknown.
        default_rows: Height used when the terminal size is unknown.
        columns_env: Environment variable consulted for the width.
        rows_env: Environment variable consulted for the height.
        double_rel_tol: Relative tolerance for `validate_double`.
        double_abs_tol: Absolute tolerance for `validate_double`.
        fatal_exit_status: Exit status used when the counters do not add up.
    """

    # Layout
    label_ratio: float = Field(default=0.60, gt=0.0, lt=1.0)
    default_columns: int = Field(default=80, ge=1)
    default_rows: int = Field(default=25, ge=1)
    columns_env: str = "COLUMNS"
    rows_env: str = "LINES"

    # Comparison
    double_rel_tol: float = Field(default=1e-9, ge=0.0)
    double_abs_tol: float = Field(default=1e-12, ge=0.0)

    # Exit status for a broken harness, kept apart from failure counts
    fatal_exit_status: int = Field(default=99, ge=1, le=255)

    @field_validator("columns_env", "rows_env")
    @classmethod
    def validate_env_name(cls, v: str) -> str:
        """Environment variable names must be non-empty."""
        if not v.strip():
            raise ValueError("Environment variable name must not be empty")
        return v

    @classmethod
    def from_yaml(cls, path: str | Path) -> ReporterConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            ReporterConfig instance.

        Raises:
            FileNotFoundError: If the config file doesn't exist.
            ConfigError: If the YAML is not a mapping or holds invalid values.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"expected a mapping, got {type(data).__name__}")

        try:
            return cls(**data)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or None
            raise ConfigError(first["msg"], field=field) from e
