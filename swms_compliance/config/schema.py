# swms_compliance/config/schema.py
"""
Pydantic configuration models for swms-compliance.

All models use extra="ignore" to allow unknown YAML keys without crashing.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RiskLevelConfig(BaseModel):
    """Which score -> risk level threshold table is authoritative."""

    model_config = ConfigDict(extra="ignore")

    table: Literal["descending", "inclusive_4_8_15", "inclusive_4_9_16"] = Field(
        default="descending",
        description="Named threshold table used to classify risk scores",
    )


class PolicyConfig(BaseModel):
    """Penalties and thresholds applied by the compliance analyzer."""

    model_config = ConfigDict(extra="ignore")

    score_mismatch_penalty: int = Field(
        default=10, ge=0, description="Risk score accuracy lost per wrong matrix score"
    )
    risk_reduction_penalty: int = Field(
        default=15, ge=0, description="Risk score accuracy lost when residual >= initial"
    )
    high_risk_score: int = Field(
        default=15, ge=1, le=25, description="Initial score at which extra controls are required"
    )
    min_control_measures: int = Field(
        default=3, ge=0, description="Control measures required for high-risk activities"
    )
    control_measures_penalty: int = Field(
        default=15, ge=0, description="Standards compliance lost per under-controlled activity"
    )
    missing_standard_penalty: int = Field(
        default=5, ge=0, description="Standards compliance lost per missing trade standard"
    )
    missing_whs_penalty: int = Field(
        default=20, ge=0, description="Legislation compliance lost per high risk item without WHS"
    )
    missing_requirement_penalty: int = Field(
        default=10, ge=0, description="Legislation compliance lost per unmet category requirement"
    )
    compliant_score: int = Field(
        default=85, ge=0, le=100, description="Minimum overall score for a compliant verdict"
    )
    accuracy_recommendation_below: int = Field(
        default=90, ge=0, le=100, description="Recommend matrix review below this accuracy"
    )
    standards_recommendation_below: int = Field(
        default=85, ge=0, le=100, description="Recommend standards review below this score"
    )
    legislation_recommendation_below: int = Field(
        default=85, ge=0, le=100, description="Recommend legislation review below this score"
    )
    penalize_empty_document: bool = Field(
        default=True,
        description="Apply the trade standards check even when there are no assessments",
    )
    documentation_checks: bool = Field(
        default=False,
        description="Report missing activity/hazard/control/PPE/responsible person details",
    )


class HistoryConfig(BaseModel):
    """In-memory analysis log configuration."""

    model_config = ConfigDict(extra="ignore")

    capacity: int = Field(
        default=1000, ge=1, description="Maximum analysis events kept in memory"
    )


class StorageConfig(BaseModel):
    """Result persistence configuration."""

    model_config = ConfigDict(extra="ignore")

    db_filename: str = Field(
        default="results.db", description="SQLite database file in the config directory"
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    model_config = ConfigDict(extra="ignore")

    verbosity: Literal["quiet", "normal", "verbose"] = Field(
        default="normal", description="Logging verbosity level"
    )


class SwmsComplianceConfig(BaseModel):
    """Root configuration for swms-compliance."""

    model_config = ConfigDict(extra="ignore")

    risk_levels: RiskLevelConfig = Field(default_factory=RiskLevelConfig)
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
