# swms_compliance/scoring/corrections.py
"""
Proposed corrections for miscalculated risk scores.

Where the analyzer only reports problems, this module proposes fixed
values: matrix scores for wrong initial/residual scores and a reduced
residual score where controls did not lower the risk. Inputs are never
mutated; corrected copies are returned alongside the list of changes.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from swms_compliance.config.schema import PolicyConfig
from swms_compliance.models.assessment import RiskAssessment
from swms_compliance.scoring.matrix import DEFAULT_BANDS, RiskBands
from swms_compliance.scoring.validator import validate_risk_score

logger = logging.getLogger(__name__)

# Residual score proposed when controls did not reduce the risk
RESIDUAL_REDUCTION_STEP = 2


class CorrectionKind(Enum):
    INITIAL_SCORE = "initial_score"
    RESIDUAL_SCORE = "residual_score"
    RISK_REDUCTION = "risk_reduction"
    CONTROL_MEASURES = "control_measures"


_SCORE_KINDS = frozenset({CorrectionKind.INITIAL_SCORE, CorrectionKind.RESIDUAL_SCORE})


@dataclass(frozen=True)
class ScoreCorrection:
    """One proposed change to a risk assessment."""

    risk_id: str | None
    activity: str
    kind: CorrectionKind
    original: int
    corrected: int
    reason: str


@dataclass
class CorrectionReport:
    """Corrected copies of the assessments plus the changes made."""

    assessments: list[RiskAssessment] = field(default_factory=list)
    corrections: list[ScoreCorrection] = field(default_factory=list)
    valid_count: int = 0  # Assessments whose initial and residual scores matched the matrix


def correct_assessment(
    risk: RiskAssessment,
    bands: RiskBands = DEFAULT_BANDS,
    policy: PolicyConfig | None = None,
) -> tuple[RiskAssessment, list[ScoreCorrection]]:
    """
    Propose corrections for one assessment.

    Returns:
        (corrected copy, corrections applied in order)
    """
    policy = policy or PolicyConfig()
    factors = risk.scoring_factors()
    corrections: list[ScoreCorrection] = []
    updates: dict = {}

    initial_score = risk.initial_risk_score
    initial = validate_risk_score(factors.likelihood, factors.consequence, initial_score)
    if not initial.is_valid:
        corrections.append(
            ScoreCorrection(
                risk_id=risk.id,
                activity=risk.activity,
                kind=CorrectionKind.INITIAL_SCORE,
                original=initial_score,
                corrected=initial.expected_score,
                reason=(
                    f"Calculated from Likelihood ({factors.likelihood}) × "
                    f"Consequence ({factors.consequence})"
                ),
            )
        )
        initial_score = initial.expected_score
        updates["initial_risk_score"] = initial_score
        updates["risk_level"] = bands.classify(initial_score).value

    residual_score = risk.residual_risk_score
    residual = validate_risk_score(
        factors.residual_likelihood, factors.residual_consequence, residual_score
    )
    if not residual.is_valid:
        corrections.append(
            ScoreCorrection(
                risk_id=risk.id,
                activity=risk.activity,
                kind=CorrectionKind.RESIDUAL_SCORE,
                original=residual_score,
                corrected=residual.expected_score,
                reason=(
                    f"Calculated from Residual Likelihood ({factors.residual_likelihood}) × "
                    f"Residual Consequence ({factors.residual_consequence})"
                ),
            )
        )
        residual_score = residual.expected_score
        updates["residual_risk_score"] = residual_score

    if residual_score >= initial_score:
        reduced = max(1, initial_score - RESIDUAL_REDUCTION_STEP)
        corrections.append(
            ScoreCorrection(
                risk_id=risk.id,
                activity=risk.activity,
                kind=CorrectionKind.RISK_REDUCTION,
                original=risk.residual_risk_score,
                corrected=reduced,
                reason="Residual risk should be lower than initial risk after control measures",
            )
        )
        updates["residual_risk_score"] = reduced

    if (
        initial_score >= policy.high_risk_score
        and len(risk.control_measures) < policy.min_control_measures
    ):
        # Flagged only; control measures cannot be invented
        corrections.append(
            ScoreCorrection(
                risk_id=risk.id,
                activity=risk.activity,
                kind=CorrectionKind.CONTROL_MEASURES,
                original=len(risk.control_measures),
                corrected=policy.min_control_measures,
                reason=(
                    f"High-risk activities require minimum {policy.min_control_measures} "
                    f"control measures"
                ),
            )
        )

    corrected = risk.model_copy(update=updates) if updates else risk
    return corrected, corrections


def propose_corrections(
    assessments: Sequence[RiskAssessment],
    bands: RiskBands = DEFAULT_BANDS,
    policy: PolicyConfig | None = None,
) -> CorrectionReport:
    """
    Propose corrections for every assessment.

    Args:
        assessments: Assessments to check (not modified)
        bands: Threshold table used to relabel corrected initial scores
        policy: High-risk thresholds (defaults to PolicyConfig())

    Returns:
        CorrectionReport with corrected copies in input order
    """
    report = CorrectionReport()
    for risk in assessments:
        corrected, corrections = correct_assessment(risk, bands=bands, policy=policy)
        report.assessments.append(corrected)
        report.corrections.extend(corrections)
        if not any(c.kind in _SCORE_KINDS for c in corrections):
            report.valid_count += 1

    logger.info(
        f"Proposed {len(report.corrections)} correction(s) for {len(report.assessments)} assessment(s)"
    )
    return report
