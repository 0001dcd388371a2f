"""Health Myth Buster: offline verification of common pregnancy health claims."""

from myth_buster.models import ClaimRecord, ClassificationResult, MythCheck, Verdict
from myth_buster.functions.myth_classifier import classify

__all__ = ["ClaimRecord", "ClassificationResult", "MythCheck", "Verdict", "classify"]
