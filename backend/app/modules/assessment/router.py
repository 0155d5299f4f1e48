# modules/assessment/router.py
"""
Endpoints du cycle de vie de l'assessment Genius Factor.
Questions → Progression / Navigation → Soumission

Règle : ce fichier ne touche jamais la DB ni l'engine.
Tout passe par AssessmentService.
"""
from fastapi import APIRouter, HTTPException, BackgroundTasks, Query, status

from app.shared.deps import DbDep, EmployeeDep, HubDep, AnalysisDep
from app.engine.assessment.eligibility import PaymentRequiredError
from app.engine.assessment.navigator import NavigationError
from app.infra.analysis_client import AnalysisServiceError
from app.modules.assessment.service import AssessmentService
from app.modules.assessment.schemas import (
    QuestionsOut,
    ProgressSnapshot,
    AnswerIn,
    TickIn,
    NavigationOut,
    ResetOut,
    SubmissionOut,
)

router = APIRouter(prefix="/assessments", tags=["Assessment"])
service = AssessmentService()


# ─────────────────────────────────────────────
# QUESTIONS
# ─────────────────────────────────────────────

@router.get(
    "/questions",
    response_model=QuestionsOut,
    summary="Banque de questions (options mélangées)",
)
async def get_questions(db: DbDep, current_user: EmployeeDep):
    """
    Contrôles dans l'ordre : abonnement (402), profil employé (400),
    profil complet (400). Les options de chaque question sont mélangées.
    """
    try:
        return await service.get_questions(db, current_user)
    except PaymentRequiredError as e:
        raise HTTPException(status_code=status.HTTP_402_PAYMENT_REQUIRED, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# ─────────────────────────────────────────────
# PROGRESSION
# ─────────────────────────────────────────────

@router.get("/progress", response_model=NavigationOut, summary="Reprendre là où on s'était arrêté")
async def get_progress(db: DbDep, current_user: EmployeeDep):
    return await service.get_progress(db, current_user.id)


@router.put("/progress", response_model=NavigationOut, summary="Sauvegarder un snapshot complet")
async def save_progress(payload: ProgressSnapshot, db: DbDep, current_user: EmployeeDep):
    """Un snapshot plus ancien que celui stocké est ignoré."""
    try:
        return await service.save_progress(db, current_user.id, payload)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/progress", response_model=ResetOut, summary="Réinitialiser l'assessment")
async def reset_progress(
    db: DbDep,
    current_user: EmployeeDep,
    confirm: bool = Query(False),
):
    try:
        return {"cleared": await service.reset(db, current_user.id, confirm)}
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# ─────────────────────────────────────────────
# NAVIGATION
# ─────────────────────────────────────────────

@router.post("/progress/answer", response_model=NavigationOut, summary="Répondre à la question courante")
async def answer_question(payload: AnswerIn, db: DbDep, current_user: EmployeeDep):
    try:
        return await service.answer(db, current_user.id, payload.question_id, payload.option)
    except NavigationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/progress/next", response_model=NavigationOut, summary="Question suivante")
async def next_question(db: DbDep, current_user: EmployeeDep):
    try:
        return await service.next(db, current_user.id)
    except NavigationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/progress/previous", response_model=NavigationOut, summary="Question précédente")
async def previous_question(db: DbDep, current_user: EmployeeDep):
    return await service.previous(db, current_user.id)


@router.post("/progress/tick", response_model=NavigationOut, summary="Tick du chronomètre")
async def tick(payload: TickIn, db: DbDep, current_user: EmployeeDep):
    return await service.tick(db, current_user.id, payload.seconds)


# ─────────────────────────────────────────────
# SOUMISSION
# ─────────────────────────────────────────────

@router.post(
    "/submit",
    response_model=SubmissionOut,
    summary="Soumettre l'assessment pour analyse",
)
async def submit_assessment(
    background_tasks: BackgroundTasks,
    db: DbDep,
    current_user: EmployeeDep,
    client: AnalysisDep,
    hub: HubDep,
):
    """
    Synchrone  : scoring + effacement progression + notification RH
    Background : génération du rapport de carrière

    En cas d'échec du scoring : 502, progression conservée, pas de redirection.
    """
    try:
        return await service.submit(db, current_user, client, hub, background_tasks)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AnalysisServiceError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
