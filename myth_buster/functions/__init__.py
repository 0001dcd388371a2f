"""Functions (single-pass nodes) for myth verification.

Functions execute a fixed sequence of steps with at most one LLM call.
They do NOT have a reasoning loop or tool-use capability.

Modules:
    myth_classifier: Statement → catalog record (offline, rule-based)
    myth_checker: Statement → verdict (catalog first, single LLM call fallback)
"""

from myth_buster.functions import myth_checker, myth_classifier

__all__ = ["myth_checker", "myth_classifier"]
