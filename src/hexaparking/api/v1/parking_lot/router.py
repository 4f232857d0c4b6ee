"""Parking Lot API Routes - Route registration only."""

from fastapi import APIRouter

from hexaparking.api.v1.parking_lot import api

router = APIRouter()
router.include_router(api.router, tags=["parking-lots"])
