"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from flashdrill.api.v1.endpoints import auth, sets, review_sessions, admin

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(auth.router)
api_router.include_router(sets.router)
api_router.include_router(review_sessions.router)
api_router.include_router(admin.router)
