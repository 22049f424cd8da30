"""Configuration and constants for the RainWise rainwater harvesting estimator.

This module defines the fixed estimation constants and the configurable
settings for the surrounding report, API and logging layers.

Includes configuration for:
- Estimation formula constants (CONSTANTS, not configurable)
- Structure geometry and cost multipliers (STRUCTURE_SPECS, not configurable)
- Assessment form rules (FormRules)
- Report rendering (ReportConfig with REPORT_ prefix)
- HTTP API server (ApiServerConfig with API_ prefix)
- Logging (LoggingConfig with LOG_ prefix)

Configuration can be overridden via:
1. Environment variables (e.g., REPORT_CURRENCY_SYMBOL="Rs.", API_PORT=9000)
2. .env file in the current directory
3. Default values in code
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rainwise.models.enums import StructureType


@dataclass(frozen=True)
class EstimationConstants:
    """Fixed constants used by the rainwater potential estimate.

    These are NOT configurable - the estimate must be a pure function of the
    assessment input and the static lookup tables, so nothing here may be read
    from the environment.

    All attributes are immutable (frozen=True prevents modification).
    """

    # Fraction of rainfall on an impervious roof assumed to be collectable
    RUNOFF_COEFFICIENT: float = 0.85

    # Unit conversion factors
    LITRES_PER_CUBIC_METRE: float = 1_000.0
    DAYS_PER_MONTH: int = 30
    MONTHS_PER_YEAR: int = 12

    # Pricing
    COST_PER_SQUARE_METRE_ROOF: float = 50.0
    WATER_PRICE_PER_LITRE: float = 4.0

    # Floors applied to derived values
    MIN_PAYBACK_YEARS: float = 0.5
    MIN_LENGTH_M: float = 2.0
    MIN_WIDTH_M: float = 2.0
    MIN_DEPTH_M: float = 1.0

    # Structure selection thresholds on open space (square metres, strict)
    TANK_MAX_OPEN_SPACE_M2: float = 20.0
    TRENCH_MIN_OPEN_SPACE_M2: float = 100.0


# Module-level singleton for estimation constants
CONSTANTS = EstimationConstants()


@dataclass(frozen=True)
class StructureSpec:
    """Geometry and cost profile of a recommended storage structure.

    Attributes:
        depth_m: Fixed structure depth in metres
        length_to_width: Length:width ratio (None for circular pits)
        cost_multiplier: Multiplier applied to the roof-area base cost
    """

    depth_m: float
    length_to_width: float | None
    cost_multiplier: float


STRUCTURE_SPECS: MappingProxyType[StructureType, StructureSpec] = MappingProxyType(
    {
        StructureType.PIT: StructureSpec(depth_m=2.0, length_to_width=None, cost_multiplier=1.0),
        StructureType.TRENCH: StructureSpec(depth_m=1.5, length_to_width=8.0, cost_multiplier=1.2),
        StructureType.TANK: StructureSpec(depth_m=2.5, length_to_width=1.5, cost_multiplier=1.5),
    }
)


@dataclass(frozen=True)
class FormRules:
    """Rules enforced on the assessment form before the estimator is invoked."""

    MIN_ROOF_AREA_M2: float = 10.0


FORM_RULES = FormRules()


class ReportConfig(BaseSettings):
    """Configuration for assessment report rendering.

    Can be overridden via environment variables with REPORT_ prefix:
    - REPORT_BRAND_NAME
    - REPORT_CURRENCY_SYMBOL
    - REPORT_FONT_PATH
    - REPORT_OUTPUT_DIR

    Attributes:
        brand_name: Product name printed in report headers and footers
        currency_symbol: Symbol prefixed to cost and savings figures
        font_path: Optional TrueType font for full Unicode PDF output
        output_dir: Default directory for written reports
    """

    model_config = SettingsConfigDict(
        env_prefix="REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    brand_name: str = Field(default="RainWise", description="Product name used in reports")
    currency_symbol: str = Field(default="₹", description="Currency symbol for cost figures")
    font_path: Path | None = Field(
        default=None,
        description="TrueType font for PDF output (core Latin-1 font used when unset)",
    )
    output_dir: Path = Field(default=Path("."), description="Default report output directory")

    @field_validator("brand_name")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            msg = "Report brand name cannot be empty"
            raise ValueError(msg)
        return v


DEFAULT_REPORT_CONFIG = ReportConfig()


class ApiServerConfig(BaseSettings):
    """Configuration for the HTTP API server.

    Can be overridden via environment variables with API_ prefix:
    - API_HOST (default: 0.0.0.0)
    - API_PORT (default: 8085)
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Interface for the API server")
    port: int = Field(default=8085, ge=1, le=65535, description="Port for the API server")


class LoggingConfig(BaseSettings):
    """Logging configuration.

    Can be overridden via environment variables with LOG_ prefix:
    - LOG_LEVEL (default: INFO)
    - LOG_JSON_FORMAT: Emit JSON lines instead of plain text (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Root log level")
    json_format: bool = Field(default=False, description="Emit JSON formatted log lines")

    @field_validator("level")
    @classmethod
    def must_be_known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level
