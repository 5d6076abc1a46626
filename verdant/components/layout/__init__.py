"""
Layout component - Root layout data priming.
"""

from .component import run_prime_layout
from .models import SITE_DESCRIPTION, SITE_TITLE, LayoutData, PrimeLayoutInput

__all__ = [
    "run_prime_layout",
    "LayoutData",
    "PrimeLayoutInput",
    "SITE_DESCRIPTION",
    "SITE_TITLE",
]
