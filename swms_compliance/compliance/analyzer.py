# swms_compliance/compliance/analyzer.py
"""
Compliance analyzer for SWMS risk assessments.

Runs one synchronous pass over a document's risk assessments:

1. Per assessment: initial and residual scores are checked against the
   risk matrix, residual risk must be lower than initial risk, and
   high-risk activities need enough control measures.
2. Across the document: every standard the trade requires must be cited
   somewhere.
3. Per assessment: High/Extreme items must cite WHS legislation, and
   activities in a regulated category must carry its mandatory controls.

Every violation becomes an Issue; nothing here raises for bad business
data. Each call builds its own accumulators, so one analyzer can be
shared between callers.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from swms_compliance.compliance.aggregator import aggregate
from swms_compliance.compliance.references import (
    LEGISLATION_REQUIREMENTS,
    citation_prefix,
    get_trade_standards,
    normalize_trade_type,
)
from swms_compliance.config.schema import PolicyConfig, SwmsComplianceConfig
from swms_compliance.models.assessment import RiskAssessment
from swms_compliance.models.history import AnalysisEvent, AnalysisLog
from swms_compliance.models.results import (
    ComplianceResult,
    Issue,
    IssueCategory,
    IssueSeverity,
)
from swms_compliance.scoring.matrix import (
    DEFAULT_BANDS,
    RiskBands,
    RiskLevel,
    get_bands,
)
from swms_compliance.scoring.validator import validate_risk_score

logger = logging.getLogger(__name__)

# Levels that must cite WHS legislation
WHS_REQUIRED_LEVELS = frozenset({RiskLevel.HIGH, RiskLevel.EXTREME})

# Characters of a requirement that must appear in some control measure
REQUIREMENT_MATCH_CHARS = 10

MIN_ACTIVITY_LENGTH = 10
PPE_REQUIRED_SCORE = 6


@dataclass
class _Scores:
    risk_score_accuracy: int = 100
    standards_compliance: int = 100
    legislation_compliance: int = 100


def coerce_assessments(assessments: Any) -> list[RiskAssessment]:
    """
    Accept RiskAssessment objects or raw dicts.

    Raises:
        TypeError: If assessments is not a list/tuple, or holds other types
    """
    if isinstance(assessments, (str, bytes)) or not isinstance(assessments, Sequence):
        raise TypeError(
            f"assessments must be a list of risk assessments, got {type(assessments).__name__}"
        )
    coerced = []
    for item in assessments:
        if isinstance(item, RiskAssessment):
            coerced.append(item)
        elif isinstance(item, dict):
            coerced.append(RiskAssessment.model_validate(item))
        else:
            raise TypeError(
                f"Risk assessment must be a RiskAssessment or dict, got {type(item).__name__}"
            )
    return coerced


def highest_risk_level(
    assessments: Sequence[RiskAssessment], bands: RiskBands = DEFAULT_BANDS
) -> RiskLevel | None:
    """Highest level derived from initial scores, or None for no assessments."""
    levels = [bands.classify(a.initial_risk_score) for a in assessments]
    if not levels:
        return None
    return max(levels, key=lambda level: level.rank)


class ComplianceAnalyzer:
    """
    Evaluates risk assessments against the matrix and regulatory tables.

    Args:
        policy: Penalties and thresholds (defaults to PolicyConfig())
        bands: Threshold table used to re-derive risk levels
        log: Optional AnalysisLog that receives one event per run
    """

    def __init__(
        self,
        policy: PolicyConfig | None = None,
        bands: RiskBands = DEFAULT_BANDS,
        log: AnalysisLog | None = None,
    ) -> None:
        self.policy = policy or PolicyConfig()
        self.bands = bands
        self.log = log

    @classmethod
    def from_config(
        cls, config: SwmsComplianceConfig, log: AnalysisLog | None = None
    ) -> "ComplianceAnalyzer":
        """
        Create an analyzer using the configured policy and risk level table.

        Without an explicit log, a fresh AnalysisLog sized by history.capacity is used.
        """
        if log is None:
            log = AnalysisLog(capacity=config.history.capacity)
        return cls(policy=config.policy, bands=get_bands(config.risk_levels.table), log=log)

    def analyze(
        self,
        assessments: Sequence[RiskAssessment | dict],
        trade_type: str,
        document_id: str | None = None,
    ) -> ComplianceResult:
        """
        Analyze a document's risk assessments.

        Args:
            assessments: Risk assessments (models or camelCase dicts)
            trade_type: Trade used to look up required standards
            document_id: Optional id recorded in the analysis log

        Returns:
            ComplianceResult, fully recomputed

        Raises:
            TypeError: If assessments is not a list of assessments
        """
        risks = coerce_assessments(assessments)
        scores = _Scores()
        issues: list[Issue] = []

        for risk in risks:
            self._check_scores(risk, scores, issues)

        if risks or self.policy.penalize_empty_document:
            self._check_standards(risks, trade_type, scores, issues)

        for risk in risks:
            self._check_legislation(risk, scores, issues)

        if self.policy.documentation_checks:
            if not risks:
                issues.append(
                    Issue(
                        type=IssueSeverity.HIGH,
                        category=IssueCategory.DOCUMENTATION,
                        message="At least one risk assessment is required",
                        resolution="Add a risk assessment for each work activity",
                    )
                )
            for risk in risks:
                self._check_documentation(risk, issues)

        result = aggregate(
            scores.risk_score_accuracy,
            scores.standards_compliance,
            scores.legislation_compliance,
            issues,
            policy=self.policy,
        )

        logger.info(
            f"Analyzed {len(risks)} assessment(s) for trade '{trade_type}': "
            f"score={result.overall_score} compliant={result.is_compliant} issues={len(issues)}"
        )

        if self.log is not None:
            self.log.record(
                AnalysisEvent(
                    trade_type=normalize_trade_type(trade_type),
                    assessment_count=len(risks),
                    overall_score=result.overall_score,
                    is_compliant=result.is_compliant,
                    critical_count=len(result.critical_issues),
                    issue_count=len(result.issues),
                    document_id=document_id,
                )
            )

        return result

    def _check_scores(self, risk: RiskAssessment, scores: _Scores, issues: list[Issue]) -> None:
        """Matrix accuracy, risk reduction and control measure count."""
        factors = risk.scoring_factors()
        policy = self.policy

        initial = validate_risk_score(factors.likelihood, factors.consequence, risk.initial_risk_score)
        if not initial.is_valid:
            issues.append(
                Issue(
                    type=IssueSeverity.HIGH,
                    category=IssueCategory.RISK_CALCULATION,
                    message=(
                        f"Initial risk score incorrect for {risk.activity}. "
                        f"Expected: {initial.expected_score}, Got: {initial.reported_score}"
                    ),
                    risk_id=risk.id,
                    resolution=(
                        f"Update risk score to {initial.expected_score} based on "
                        f"Likelihood ({factors.likelihood}) × Consequence ({factors.consequence})"
                    ),
                )
            )
            scores.risk_score_accuracy -= policy.score_mismatch_penalty

        residual = validate_risk_score(
            factors.residual_likelihood, factors.residual_consequence, risk.residual_risk_score
        )
        if not residual.is_valid:
            issues.append(
                Issue(
                    type=IssueSeverity.HIGH,
                    category=IssueCategory.RISK_CALCULATION,
                    message=(
                        f"Residual risk score incorrect for {risk.activity}. "
                        f"Expected: {residual.expected_score}, Got: {residual.reported_score}"
                    ),
                    risk_id=risk.id,
                    resolution=f"Update residual risk score to {residual.expected_score}",
                )
            )
            scores.risk_score_accuracy -= policy.score_mismatch_penalty

        # Independent of matrix validity
        if risk.residual_risk_score >= risk.initial_risk_score:
            issues.append(
                Issue(
                    type=IssueSeverity.CRITICAL,
                    category=IssueCategory.RISK_CALCULATION,
                    message=(
                        f"Risk not adequately reduced for {risk.activity}. "
                        f"Residual risk ({risk.residual_risk_score}) should be lower than "
                        f"initial risk ({risk.initial_risk_score})"
                    ),
                    risk_id=risk.id,
                    resolution="Review and strengthen control measures to achieve risk reduction",
                )
            )
            scores.risk_score_accuracy -= policy.risk_reduction_penalty

        if (
            risk.initial_risk_score >= policy.high_risk_score
            and len(risk.control_measures) < policy.min_control_measures
        ):
            issues.append(
                Issue(
                    type=IssueSeverity.CRITICAL,
                    category=IssueCategory.STANDARDS,
                    message=(
                        f"Insufficient control measures for high-risk activity: {risk.activity}. "
                        f"High-risk activities require minimum {policy.min_control_measures} "
                        f"control measures"
                    ),
                    risk_id=risk.id,
                    resolution="Add additional control measures to meet Australian standards",
                )
            )
            scores.standards_compliance -= policy.control_measures_penalty

    def _check_standards(
        self,
        risks: list[RiskAssessment],
        trade_type: str,
        scores: _Scores,
        issues: list[Issue],
    ) -> None:
        """Every standard the trade requires must be cited by some assessment."""
        trade_standards = get_trade_standards(trade_type)
        if trade_standards is None:
            logger.debug(f"No standards reference for trade '{trade_type}', skipping")
            return

        mentioned = [citation for risk in risks for citation in risk.legislation]
        for standard in trade_standards.all_required():
            prefix = citation_prefix(standard)
            if any(prefix in citation for citation in mentioned):
                continue
            issues.append(
                Issue(
                    type=IssueSeverity.MEDIUM,
                    category=IssueCategory.STANDARDS,
                    message=f"Missing reference to required standard: {standard}",
                    resolution=f"Include {standard} in relevant risk assessments",
                )
            )
            scores.standards_compliance -= self.policy.missing_standard_penalty

    def _check_legislation(self, risk: RiskAssessment, scores: _Scores, issues: list[Issue]) -> None:
        """WHS citation for High/Extreme items and category-mandated controls."""
        level = self.bands.classify(risk.initial_risk_score)
        if level in WHS_REQUIRED_LEVELS and not any("WHS" in leg for leg in risk.legislation):
            issues.append(
                Issue(
                    type=IssueSeverity.CRITICAL,
                    category=IssueCategory.LEGISLATION,
                    message=(
                        f'High/Extreme risk activity "{risk.activity}" missing WHS '
                        f"legislation reference"
                    ),
                    risk_id=risk.id,
                    resolution="Add relevant WHS Act 2011 and WHS Regulation 2017 references",
                )
            )
            scores.legislation_compliance -= self.policy.missing_whs_penalty

        activity = risk.activity.lower()
        controls = [control.lower() for control in risk.control_measures]
        for category, requirements in LEGISLATION_REQUIREMENTS.items():
            if re.sub(r"\s+", " ", category.lower()) not in activity:
                continue
            for requirement in requirements:
                fragment = requirement.lower()[:REQUIREMENT_MATCH_CHARS]
                if any(fragment in control for control in controls):
                    continue
                issues.append(
                    Issue(
                        type=IssueSeverity.HIGH,
                        category=IssueCategory.LEGISLATION,
                        message=f"Missing requirement for {category}: {requirement}",
                        risk_id=risk.id,
                        resolution=f"Add control measure: {requirement}",
                    )
                )
                scores.legislation_compliance -= self.policy.missing_requirement_penalty

    def _check_documentation(self, risk: RiskAssessment, issues: list[Issue]) -> None:
        """Completeness of the form fields; reported without affecting sub-scores."""
        label = risk.activity or "(unnamed activity)"

        def add(severity: IssueSeverity, message: str, resolution: str) -> None:
            issues.append(
                Issue(
                    type=severity,
                    category=IssueCategory.DOCUMENTATION,
                    message=message,
                    risk_id=risk.id,
                    resolution=resolution,
                )
            )

        if len(risk.activity) < MIN_ACTIVITY_LENGTH:
            add(
                IssueSeverity.MEDIUM,
                f"Task description too short for {label}",
                f"Describe the activity in at least {MIN_ACTIVITY_LENGTH} characters",
            )
        if not any(h.strip() for h in risk.hazards):
            add(
                IssueSeverity.MEDIUM,
                f"No hazards identified for {label}",
                "Identify at least one hazard",
            )
        if not any(c.strip() for c in risk.control_measures):
            add(
                IssueSeverity.MEDIUM,
                f"No control measures specified for {label}",
                "Specify at least one control measure",
            )
        if risk.initial_risk_score >= PPE_REQUIRED_SCORE and not any(p.strip() for p in risk.ppe):
            add(
                IssueSeverity.MEDIUM,
                f"No PPE specified for {label}",
                "List the PPE required for this activity",
            )
        if not risk.responsible.strip():
            add(
                IssueSeverity.LOW,
                f"No responsible person for {label}",
                "Name the person responsible for implementing the controls",
            )
