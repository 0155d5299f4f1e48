# modules/assessment/repository.py
"""
Accès DB pour la progression et l'éligibilité à l'assessment.

Une seule ligne assessment_progress par utilisateur : upsert à chaque
changement d'état, suppression à la soumission ou au reset.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import Dict, Optional

from app.shared.models import AssessmentProgress, EmployeeProfile, IndividualEmployeeReport


class AssessmentRepository:

    # ── Progression ───────────────────────────────────────

    async def get_progress(self, db: AsyncSession, user_id: str) -> Optional[AssessmentProgress]:
        r = await db.execute(
            select(AssessmentProgress).where(AssessmentProgress.user_id == user_id)
        )
        return r.scalar_one_or_none()

    async def upsert_progress(self, db: AsyncSession, user_id: str, data: Dict) -> AssessmentProgress:
        """data : answers (clés str), indices, time_spent_seconds, timestamp."""
        row = await self.get_progress(db, user_id)
        if row is None:
            row = AssessmentProgress(user_id=user_id, **data)
            db.add(row)
        else:
            for key, value in data.items():
                setattr(row, key, value)
        await db.commit()
        await db.refresh(row)
        return row

    async def delete_progress(self, db: AsyncSession, user_id: str) -> None:
        await db.execute(
            delete(AssessmentProgress).where(AssessmentProgress.user_id == user_id)
        )
        await db.commit()

    # ── Éligibilité ───────────────────────────────────────

    async def get_employee_profile(self, db: AsyncSession, user_id: str) -> Optional[EmployeeProfile]:
        r = await db.execute(select(EmployeeProfile).where(EmployeeProfile.user_id == user_id))
        return r.scalar_one_or_none()

    async def has_report(self, db: AsyncSession, user_id: str) -> bool:
        r = await db.execute(
            select(IndividualEmployeeReport.id)
            .where(IndividualEmployeeReport.user_id == user_id)
            .limit(1)
        )
        return r.scalar_one_or_none() is not None
