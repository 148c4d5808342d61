"""Pydantic contracts exchanged with the simulators and the HTTP API."""

from finplan.schemas.common import CalculationStatus, Recommendation, Tag
from finplan.schemas.retirement import (
    CorpusGrowthEntry,
    ReadinessBand,
    RetirementParameters,
    RetirementResult,
    SustainabilityEntry,
)
from finplan.schemas.sip import SipMonthRecord, SipParameters, SipResult, SipYearSummary
from finplan.schemas.swp import SwpMonthRecord, SwpParameters, SwpResult, SwpYearSummary

__all__ = [
    "CalculationStatus",
    "CorpusGrowthEntry",
    "ReadinessBand",
    "Recommendation",
    "RetirementParameters",
    "RetirementResult",
    "SipMonthRecord",
    "SipParameters",
    "SipResult",
    "SipYearSummary",
    "SustainabilityEntry",
    "SwpMonthRecord",
    "SwpParameters",
    "SwpResult",
    "SwpYearSummary",
    "Tag",
]
