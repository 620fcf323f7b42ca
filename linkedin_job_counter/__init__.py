# =============================================================================
# LinkedIn Job Counter - Package
# =============================================================================
"""
LinkedIn Job Counter

A FastAPI service that drives a headless browser to a company's LinkedIn
jobs page and reports how many openings it lists.
"""

__version__ = "0.1.0"
