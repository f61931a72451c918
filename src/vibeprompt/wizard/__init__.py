"""Wizard state machine and the session that drives assistant requests."""

from vibeprompt.wizard.session import WizardSession
from vibeprompt.wizard.state import (
    MIN_CORE_FEATURES,
    RequestPurpose,
    RequestTracker,
    WizardState,
    WizardStep,
    can_advance,
)

__all__ = [
    "MIN_CORE_FEATURES",
    "RequestPurpose",
    "RequestTracker",
    "WizardSession",
    "WizardState",
    "WizardStep",
    "can_advance",
]
