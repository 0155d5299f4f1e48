# modules/assessment/service.py
"""
Orchestration du cycle de vie de l'assessment Genius Factor.

Responsabilités :
1. Livrer la banque de questions (contrôles d'éligibilité + options mélangées)
2. Charger / sauvegarder / effacer la progression (une ligne par utilisateur)
3. Piloter la navigation via engine/assessment/navigator.py
4. Soumettre : tally + aplatissement (engine) → scoring (infra) →
   rapport en background → nettoyage + notification RH
"""
import logging
import random
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import BackgroundTasks
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.content.questions import get_questions_by_part
from app.core.config import settings
from app.engine.assessment.eligibility import check_eligibility
from app.engine.assessment.navigator import AssessmentNavigator
from app.engine.assessment.tally import build_submission_payload, find_unanswered
from app.infra.analysis_client import AnalysisClient, AnalysisResponseError, AnalysisServiceError
from app.infra.realtime import RealtimeHub
from app.modules.assessment.repository import AssessmentRepository
from app.modules.assessment.schemas import AnalysisResultOut, ProgressSnapshot
from app.modules.hr.repository import HRRepository
from app.shared.enums import SubmissionStatus

logger = logging.getLogger(__name__)

repo = AssessmentRepository()
hr_repo = HRRepository()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def current_department(user) -> str:
    """Dernier département de la liste (le plus récent)."""
    departments = user.department or []
    return departments[-1] if departments else ""


async def generate_report_task(client: AnalysisClient, user_id: str) -> None:
    """Background : un échec est loggé, jamais propagé au scoring."""
    try:
        await client.generate_career_recommendation(user_id)
        logger.info("Rapport de carrière demandé pour %s", user_id)
    except AnalysisServiceError as e:
        logger.error("Échec génération rapport pour %s : %s", user_id, e)


class AssessmentService:

    def __init__(self, parts: Optional[List[Dict]] = None):
        self.parts = parts or get_questions_by_part()
        self._questions = {q["id"]: q for p in self.parts for q in p["questions"]}

    # ── Questions ─────────────────────────────────────────

    async def get_questions(self, db: AsyncSession, user) -> Dict:
        """Lève PaymentRequiredError (402) ou ValueError (400) selon l'ordre des contrôles."""
        profile = await repo.get_employee_profile(db, user.id)
        has_report = False if user.paid else await repo.has_report(db, user.id)

        check_eligibility(
            paid=bool(user.paid),
            has_existing_report=has_report,
            profile_skills=profile.skills if profile else None,
            has_profile=profile is not None,
            department=user.department,
            position=user.position,
        )

        parts = [
            {
                "part": part["part"],
                "questions": [
                    {**q, "options": random.sample(q["options"], len(q["options"]))}
                    for q in part["questions"]
                ],
            }
            for part in self.parts
        ]
        return {
            "parts": parts,
            "user_status": {
                "paid": bool(user.paid),
                "has_employee_profile": True,
                "is_profile_complete": True,
            },
        }

    # ── Progression ───────────────────────────────────────

    def _validate_snapshot(self, snapshot: ProgressSnapshot) -> AssessmentNavigator:
        """Lève ValueError si le snapshot ne correspond pas à la banque."""
        for question_id, option in snapshot.answers.items():
            question = self._questions.get(question_id)
            if question is None:
                raise ValueError(f"Question inconnue : {question_id}")
            if option not in question["options"]:
                raise ValueError(f"Option invalide pour la question {question_id}")
        return AssessmentNavigator(
            self.parts,
            answers=snapshot.answers,
            part_index=snapshot.current_part_index,
            question_index=snapshot.current_question_index,
        )

    async def load_progress(self, db: AsyncSession, user_id: str) -> Optional[ProgressSnapshot]:
        """
        Snapshot de l'utilisateur, ou None.
        Une ligne corrompue est supprimée et loggée, jamais remontée.
        """
        row = await repo.get_progress(db, user_id)
        if row is None:
            return None
        try:
            snapshot = ProgressSnapshot.model_validate(row)
            self._validate_snapshot(snapshot)
        except (ValidationError, ValueError) as e:
            logger.warning("Progression corrompue pour %s, supprimée : %s", user_id, e)
            await repo.delete_progress(db, user_id)
            return None
        return snapshot

    async def _persist(self, db: AsyncSession, user_id: str, snapshot: ProgressSnapshot) -> ProgressSnapshot:
        """Écrase la ligne, sauf si le timestamp reçu est plus ancien que celui stocké."""
        stored = await self.load_progress(db, user_id)
        if stored is not None and _aware(snapshot.timestamp) < _aware(stored.timestamp):
            logger.info("Sauvegarde obsolète ignorée pour %s", user_id)
            return stored

        await repo.upsert_progress(db, user_id, {
            "answers": {str(k): v for k, v in snapshot.answers.items()},
            "current_part_index": snapshot.current_part_index,
            "current_question_index": snapshot.current_question_index,
            "time_spent_seconds": snapshot.time_spent_seconds,
            "timestamp": _aware(snapshot.timestamp),
        })
        return snapshot

    def _view(self, snapshot: Optional[ProgressSnapshot]) -> Dict:
        if snapshot is None:
            navigator = AssessmentNavigator(self.parts)
            return {
                **navigator.to_view(),
                "answers": {},
                "time_spent_seconds": 0,
                "timestamp": None,
                "has_saved_progress": False,
            }
        navigator = self._validate_snapshot(snapshot)
        return {
            **navigator.to_view(),
            "answers": dict(navigator.answers),
            "time_spent_seconds": snapshot.time_spent_seconds,
            "timestamp": snapshot.timestamp,
            "has_saved_progress": True,
        }

    async def _mutate(self, db: AsyncSession, user_id: str, action) -> Dict:
        """Charge, applique une transition du navigator, sauvegarde."""
        stored = await self.load_progress(db, user_id)
        if stored is None:
            stored = ProgressSnapshot(timestamp=_utcnow())
        navigator = self._validate_snapshot(stored)

        action(navigator)   # peut lever NavigationError

        snapshot = ProgressSnapshot(
            answers=navigator.answers,
            current_part_index=navigator.part_index,
            current_question_index=navigator.question_index,
            time_spent_seconds=stored.time_spent_seconds,
            timestamp=_utcnow(),
        )
        return self._view(await self._persist(db, user_id, snapshot))

    async def get_progress(self, db: AsyncSession, user_id: str) -> Dict:
        return self._view(await self.load_progress(db, user_id))

    async def save_progress(self, db: AsyncSession, user_id: str, snapshot: ProgressSnapshot) -> Dict:
        """Sauvegarde complète envoyée par le client. ValueError si incohérente."""
        self._validate_snapshot(snapshot)
        return self._view(await self._persist(db, user_id, snapshot))

    async def answer(self, db: AsyncSession, user_id: str, question_id: int, option: str) -> Dict:
        return await self._mutate(
            db, user_id, lambda nav: nav.handle_answer_change(question_id, option)
        )

    async def next(self, db: AsyncSession, user_id: str) -> Dict:
        return await self._mutate(db, user_id, lambda nav: nav.next())

    async def previous(self, db: AsyncSession, user_id: str) -> Dict:
        return await self._mutate(db, user_id, lambda nav: nav.previous())

    async def tick(self, db: AsyncSession, user_id: str, seconds: int = 1) -> Dict:
        """Tick du chronomètre : écrit à chaque appel, sans debounce."""
        stored = await self.load_progress(db, user_id)
        if stored is None:
            stored = ProgressSnapshot(timestamp=_utcnow())
        snapshot = stored.model_copy(update={
            "time_spent_seconds": stored.time_spent_seconds + seconds,
            "timestamp": _utcnow(),
        })
        return self._view(await self._persist(db, user_id, snapshot))

    async def reset(self, db: AsyncSession, user_id: str, confirm: bool) -> bool:
        if not confirm:
            raise ValueError("Reset requires confirmation (confirm=true).")
        await repo.delete_progress(db, user_id)
        logger.info("Progression réinitialisée pour %s", user_id)
        return True

    # ── Soumission ────────────────────────────────────────

    async def submit(
        self,
        db: AsyncSession,
        user,
        client: AnalysisClient,
        hub: RealtimeHub,
        background_tasks: BackgroundTasks,
    ) -> Dict:
        """
        Pipeline complet de soumission :
        1. Garde : toutes les questions répondues, dernière question (ValueError sinon)
        2. Tally + aplatissement (engine)
        3. Scoring (SYNCHRONE, AnalysisServiceError ou résultats invalides → progression conservée)
        4. Génération du rapport (background, échec loggé seulement)
        5. Effacement progression + refresh dashboard RH + notification durable
        """
        snapshot = await self.load_progress(db, user.id)
        answers = snapshot.answers if snapshot else {}

        # 1. Garde : tout répondu, puis position terminale
        missing = find_unanswered(self.parts, answers)
        if missing:
            raise ValueError(
                f"Please answer all questions before submitting ({len(missing)} remaining)."
            )
        if not self._validate_snapshot(snapshot).can_submit():
            raise ValueError("Submission is only available from the last question.")

        # 2. Mise en forme (engine)
        payload = build_submission_payload(
            self.parts,
            answers,
            user_id=user.id,
            hr_id=user.hr_id,
            departement=current_department(user),
            employee_name=user.name,
            employee_email=user.email,
            is_paid=bool(user.paid),
        )

        # 3. Scoring : une erreur remonte telle quelle, la progression reste intacte
        raw_results = await client.analyze_assessment(payload)
        try:
            results = [
                AnalysisResultOut.model_validate(r).model_dump() for r in raw_results
            ]
        except ValidationError as e:
            logger.error("Résultats de scoring invalides pour %s : %s", user.id, e)
            raise AnalysisResponseError("Invalid response from API - no valid data received") from e

        # 4. Rapport de carrière (background)
        background_tasks.add_task(generate_report_task, client, user.id)

        # 5. Nettoyage + signaux RH (la notification ne fait jamais échouer la soumission)
        await repo.delete_progress(db, user.id)
        if user.hr_id:
            hub.emit_dashboard_refresh(user.hr_id, user_id=user.id)
            try:
                await hr_repo.create_notification(db, {
                    "hr_id": user.hr_id,
                    "message": f"{user.name} has completed the Genius Factor assessment.",
                    "employee_name": user.name,
                    "employee_email": user.email,
                    "type": "assessment_completed",
                    "data": {"userId": user.id, "departement": payload["departement"]},
                })
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error("Notification RH non enregistrée pour %s : %s", user.id, e)

        logger.info("Assessment soumis par %s (%d parties)", user.id, len(results))
        return {
            "status": SubmissionStatus.SUCCESS.value,
            "results": results,
            "redirect_to": settings.RESULTS_URL,
            "redirect_delay_seconds": settings.POST_SUBMIT_REDIRECT_DELAY_SECONDS,
        }
