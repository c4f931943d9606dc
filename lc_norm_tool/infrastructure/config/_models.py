# lc_norm_tool/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import load
from logging import getLogger
from pathlib import Path
from typing import Literal

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from lc_norm_tool.core.types.json import JSONDict

logger = getLogger(__name__)

OutputFormat = Literal["csv", "xlsx"]


class ColumnsConfig(BaseModel):
    """Column selection and naming"""

    lc_column: str = Field("LC", min_length=1, description="Column holding the call number")
    renames: dict[str, str] = Field(
        default_factory=dict, description="Output header renames (old name -> new name)"
    )
    keep: list[str] | None = Field(None, description="Columns to keep, None keeps all")


class InputConfig(BaseModel):
    """Input file reading"""

    delimiter: str | None = Field(
        None, min_length=1, max_length=1, description="Field delimiter, None picks from extension"
    )
    encoding: str = Field("utf-8-sig", description="Text encoding of delimited input")
    fold_unicode: bool = Field(False, description="ASCII-fold cells before parsing")
    sheet_name: str | None = Field(None, description="Worksheet to read from XLSX input")


class ProcessingConfig(BaseModel):
    """Processing configuration with validation"""

    max_workers: int = Field(1, ge=1, description="Worker processes for parsing")
    chunk_size: int = Field(500, gt=0, description="Rows handed to a worker at a time")
    reject_notes: bool = Field(False, description="Report records carrying a note as rejected")

    @field_validator("max_workers")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        """Ensure max_workers is reasonable"""
        if v > 64:
            raise ValueError("max_workers should not exceed 64")
        return v


class OutputConfig(BaseModel):
    """Output configuration"""

    formats: list[OutputFormat] = Field(
        default_factory=lambda: ["csv"], min_length=1, description="Output formats to write"
    )
    write_rejected_report: bool = Field(True, description="Write a CSV of rejected rows")


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    columns: ColumnsConfig = Field(default_factory=ColumnsConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file, None looks for
                config.json in the current directory

        Returns:
            Validated AppConfig instance
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = Path("config.json")

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = load(f)
            return cls.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        return self.model_dump()
