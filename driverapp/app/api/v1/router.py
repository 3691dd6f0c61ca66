"""
API v1 Router.

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter
from driverapp.app.api.v1.endpoints import auth, trips

router = APIRouter()

# Registration and login (no bearer token)
router.include_router(auth.router)

# Trip booking and acceptance (bearer token)
router.include_router(trips.router)
