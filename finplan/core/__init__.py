"""Deterministic SIP, SWP and retirement simulations."""

from finplan.core.retirement import plan_retirement
from finplan.core.sip import simulate_sip
from finplan.core.swp import simulate_swp

__all__ = ["plan_retirement", "simulate_sip", "simulate_swp"]
