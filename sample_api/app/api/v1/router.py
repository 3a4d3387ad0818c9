"""
Top‑level router for version 1 of the API.
"""

from fastapi import APIRouter

from .endpoints import orders

router = APIRouter()

router.include_router(orders.router, prefix="/orders", tags=["orders"])
