"""HTTP API for rainwater harvesting assessments.

Each feature has its own router module, assembled here into a single
FastAPI app.

Endpoints:
    GET  /health              - Health check
    GET  /locations           - Known locations and their reference data
    POST /assessments         - Validate a form and return the estimate and report
    POST /assessments/report  - Validate a form and return the PDF report
    GET  /map                 - Map preview for a location
"""

from fastapi import FastAPI

from rainwise import __version__
from rainwise.api.assessment_router import router as assessment_router
from rainwise.api.health_router import router as health_router

app = FastAPI(title="RainWise Assessment API", version=__version__)

app.include_router(health_router)
app.include_router(assessment_router)
