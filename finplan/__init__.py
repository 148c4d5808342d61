"""Personal-finance projections: SIP growth, SWP drawdown and retirement readiness."""

from finplan.core import plan_retirement, simulate_sip, simulate_swp
from finplan.domain.validation import InvalidParameter

__version__ = "0.1.0"

__all__ = ["InvalidParameter", "plan_retirement", "simulate_sip", "simulate_swp"]
