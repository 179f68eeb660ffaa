# src/api/v1/router.py

from fastapi import APIRouter
from src.api.v1.portfolio import router as portfolio_router

# Create a main router for API version 1
router = APIRouter()

router.include_router(portfolio_router, tags=["Portfolio"])
