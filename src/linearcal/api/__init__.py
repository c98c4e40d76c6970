"""API route modules."""

from linearcal.api.calendar import router as calendar_router
from linearcal.api.vault import router as vault_router

__all__ = ["calendar_router", "vault_router"]
