"""
===========================================================
exceptions.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===========================================================
Error types raised by the transmissible vaccine model.

InvalidInputError subclasses ValueError and IntegrationError
subclasses RuntimeError, so callers catching the builtins
keep working.
-----------------------------------------------------------
License: MIT
===========================================================
"""


class TransVaxError(Exception):
    """Base class for all model errors"""


class InvalidInputError(TransVaxError, ValueError):
    """Scenario inputs or parameter constants outside their valid range"""


class IntegrationError(TransVaxError, RuntimeError):
    """The ODE solver could not produce a finite trajectory"""

    def __init__(self, message: str, scenario: str = None):
        if scenario is not None:
            message = f"[{scenario}] {message}"
        super().__init__(message)
        self.scenario = scenario
