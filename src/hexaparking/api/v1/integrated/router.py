"""Integrated Parking API Routes - Route registration only."""

from fastapi import APIRouter

from hexaparking.api.v1 import INTEGRATED_PREFIX
from hexaparking.api.v1.integrated import api

router = APIRouter()
router.include_router(api.router, prefix=INTEGRATED_PREFIX, tags=["integrated-parking"])
