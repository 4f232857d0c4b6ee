"""Car API Routes - Route registration only."""

from fastapi import APIRouter

from hexaparking.api.v1 import CARS_PREFIX
from hexaparking.api.v1.car import api

router = APIRouter()
router.include_router(api.router, prefix=CARS_PREFIX, tags=["cars"])
