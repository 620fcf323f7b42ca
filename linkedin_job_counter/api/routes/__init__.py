# =============================================================================
# Routes Package
# =============================================================================
"""
HTTP route modules.
"""
