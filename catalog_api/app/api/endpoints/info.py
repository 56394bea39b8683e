"""
Static informational endpoints.

``/hello``, ``/v1`` and ``/v2`` hold no state and never touch the
stores; they exist so clients and load balancers can check that the
service is up.
"""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/hello", response_model=Dict[str, str])
async def hello() -> Dict[str, str]:
    return {"message": "hello world"}


@router.get("/v1", response_model=Dict[str, str])
async def version_one() -> Dict[str, str]:
    return {"version": "v1", "message": "users and products API, version 1"}


@router.get("/v2", response_model=Dict[str, str])
async def version_two() -> Dict[str, str]:
    return {"version": "v2", "message": "users and products API, version 2"}
