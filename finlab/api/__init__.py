"""
API routes for the lecture calculators.
"""

from fastapi import APIRouter

from finlab.api import time_value, bonds, stocks, capital

router = APIRouter()

# Include sub-routers
router.include_router(time_value.router, prefix="/tvm", tags=["time value"])
router.include_router(bonds.router, prefix="/bonds", tags=["bonds"])
router.include_router(stocks.router, prefix="/stocks", tags=["stocks"])
router.include_router(capital.router, prefix="/capital", tags=["cost of capital"])
