# modules/results/router.py
"""
Endpoints des résultats Genius Factor.

Employé : liste de ses rapports, vue d'un rapport (sélection + gating + pagination)
Service d'analyse : dépôt d'un rapport généré (clé interne)
"""
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

from app.shared.deps import DbDep, UserDep, InternalDep
from app.modules.results.service import ResultsService
from app.modules.results.schemas import ResultsListOut, ReportViewOut, ReportIn, ReportOut

router = APIRouter(prefix="/results", tags=["Results"])
service = ResultsService()

LOAD_ERROR = "Error Loading Results. Please try again later."


@router.get("", response_model=ResultsListOut, summary="Mes rapports")
async def list_results(db: DbDep, current_user: UserDep):
    """Projection réduite pour un compte non payant."""
    try:
        return await service.list_results(db, current_user)
    except SQLAlchemyError:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=LOAD_ERROR)


@router.get("/view", response_model=ReportViewOut, summary="Afficher un rapport")
async def view_result(
    db: DbDep,
    current_user: UserDep,
    id: Optional[int] = Query(None, description="Rapport demandé ; sinon le plus récent"),
    page: int = Query(1),
    preview: bool = Query(False),
):
    try:
        return await service.view_result(db, current_user, report_id=id, page=page, preview=preview)
    except SQLAlchemyError:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=LOAD_ERROR)


@router.post(
    "/reports",
    response_model=ReportOut,
    status_code=status.HTTP_201_CREATED,
    summary="Dépôt d'un rapport par le service d'analyse",
)
async def store_report(payload: ReportIn, db: DbDep, _: InternalDep):
    try:
        return await service.store_report(db, payload)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
