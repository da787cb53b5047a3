# swms_compliance/models/assessment.py
"""
Risk assessment input model.

One RiskAssessment is one hazard/activity line of a SWMS. Records arrive
in the camelCase JSON shape produced by the SWMS builder forms; both
camelCase and snake_case names are accepted.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_LIST_FIELDS = ("hazards", "controlMeasures", "legislation", "ppe")
_TEXT_FIELDS = ("activity", "riskLevel", "responsible")
_SCORE_FIELDS = ("initialRiskScore", "residualRiskScore")


@dataclass(frozen=True)
class ScoringFactors:
    """Likelihood/consequence pairs after defaulting (not yet clamped)."""

    likelihood: int
    consequence: int
    residual_likelihood: int
    residual_consequence: int


class RiskAssessment(BaseModel):
    """A single hazard/activity line with its initial and residual risk."""

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str | None = Field(default=None, description="Identifier used to reference issues")
    activity: str = Field(default="", description="Work activity description")
    hazards: list[str] = Field(default_factory=list, description="Identified hazards")
    likelihood: int | None = Field(default=None, description="Initial likelihood (1-5)")
    consequence: int | None = Field(default=None, description="Initial consequence (1-5)")
    initial_risk_score: int = Field(default=0, description="Reported initial risk score")
    control_measures: list[str] = Field(default_factory=list, description="Control measures")
    residual_likelihood: int | None = Field(
        default=None, description="Likelihood after controls (falls back to likelihood)"
    )
    residual_consequence: int | None = Field(
        default=None, description="Consequence after controls (falls back to consequence)"
    )
    residual_risk_score: int = Field(default=0, description="Reported residual risk score")
    risk_level: str = Field(default="", description="Author-entered risk level (not trusted)")
    legislation: list[str] = Field(default_factory=list, description="Legislation and standards cited")
    ppe: list[str] = Field(default_factory=list, description="Personal protective equipment")
    responsible: str = Field(default="", description="Person responsible for the controls")

    @model_validator(mode="before")
    @classmethod
    def _fill_missing_values(cls, data: Any) -> Any:
        """Replace nulls from form data with empty values."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for camel in _LIST_FIELDS:
            for key in (camel, _to_snake(camel)):
                if key in data and data[key] is None:
                    data[key] = []
        for camel in _TEXT_FIELDS:
            for key in (camel, _to_snake(camel)):
                if key in data and data[key] is None:
                    data[key] = ""
        for camel in _SCORE_FIELDS:
            for key in (camel, _to_snake(camel)):
                if key in data and data[key] is None:
                    data[key] = 0
        if data.get("id") is not None:
            data["id"] = str(data["id"])
        return data

    def scoring_factors(self) -> ScoringFactors:
        """
        Apply the defaulting rules for risk factors.

        Missing or zero factors default to 1. Residual factors fall back to
        the initial factors before defaulting.
        """
        return ScoringFactors(
            likelihood=self.likelihood or 1,
            consequence=self.consequence or 1,
            residual_likelihood=self.residual_likelihood or self.likelihood or 1,
            residual_consequence=self.residual_consequence or self.consequence or 1,
        )


def _to_snake(name: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in name)
