# main.py
"""
Point d'entrée de l'API Genius Factor.
Enregistre tous les modules via leurs routers.

Architecture : modules verticaux quasi-autonomes + engine transversal.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging import configure_logging

from app.modules.assessment.router import router as assessment_router
from app.modules.results.router    import router as results_router
from app.modules.hr.router         import router as hr_router

configure_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(assessment_router)
app.include_router(results_router)
app.include_router(hr_router)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "1.0.0"}
