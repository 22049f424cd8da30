"""Liveness endpoint for the assessment API."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health():
    """Report that the API process is up and able to serve assessments."""
    return {"status": "ok"}
