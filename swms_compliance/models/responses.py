# swms_compliance/models/responses.py
"""
Pydantic response models for service-layer outputs.

All tools return structured responses using these models for consistency.
"""

from pydantic import BaseModel, Field


class AnalyzeResponse(BaseModel):
    """Response from analyze_document."""

    document_id: str | None = Field(default=None, description="SWMS document identifier")
    trade_type: str = Field(description="Trade the document was checked against")
    assessment_count: int = Field(description="Number of risk assessments analyzed")
    risk_level: str = Field(description="Highest risk level across the assessments")
    saved: bool = Field(default=False, description="Whether the result was persisted")
    result: dict = Field(description="ComplianceResult with camelCase field names")


class ResultSummary(BaseModel):
    """Summary of one stored result (used in list_results)."""

    document_id: str = Field(description="SWMS document identifier")
    trade_type: str = Field(description="Trade the document was checked against")
    overall_score: int = Field(ge=0, description="Overall compliance score")
    is_compliant: bool = Field(description="Compliance verdict")
    critical_count: int = Field(description="Number of critical issues")
    risk_level: str = Field(description="Highest risk level across the assessments")
    assessed_at: str = Field(description="Assessment timestamp (ISO format)")


class ListResultsResponse(BaseModel):
    """Response from list_results."""

    results: list[ResultSummary] = Field(
        default_factory=list, description="Stored results, newest first"
    )
    total: int = Field(description="Total number of stored results")


class ResultDetailResponse(BaseModel):
    """Response from get_result."""

    document_id: str = Field(description="SWMS document identifier")
    trade_type: str = Field(description="Trade the document was checked against")
    risk_level: str = Field(description="Highest risk level across the assessments")
    assessment_type: str = Field(description="auto or manual")
    assessed_at: str = Field(description="Assessment timestamp (ISO format)")
    result: dict = Field(description="ComplianceResult with camelCase field names")
