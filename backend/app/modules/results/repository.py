# modules/results/repository.py
"""
Accès DB pour les rapports individuels.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Dict, List, Optional

from app.shared.models import IndividualEmployeeReport, User


class ResultsRepository:

    async def list_reports(self, db: AsyncSession, user_id: str) -> List[IndividualEmployeeReport]:
        r = await db.execute(
            select(IndividualEmployeeReport)
            .where(IndividualEmployeeReport.user_id == user_id)
            .order_by(IndividualEmployeeReport.created_at.desc())
        )
        return r.scalars().all()

    async def get_user(self, db: AsyncSession, user_id: str) -> Optional[User]:
        r = await db.execute(select(User).where(User.id == user_id))
        return r.scalar_one_or_none()

    async def create_report(self, db: AsyncSession, data: Dict) -> IndividualEmployeeReport:
        db_obj = IndividualEmployeeReport(**data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj
