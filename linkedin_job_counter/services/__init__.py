# =============================================================================
# Services Package
# =============================================================================
"""
Business logic services for the LinkedIn Job Counter.
"""
