# modules/hr/repository.py
"""
Accès DB pour le tableau de bord RH.

Notifications durables, suggestions de recherche, agrégats départements.
Toutes les requêtes sont bornées au périmètre hr_id du demandeur.
"""
import uuid
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_
from typing import Dict, List, Optional

from app.shared.enums import NotificationStatus, UserRole
from app.shared.models import Notification, User, IndividualEmployeeReport


class HRRepository:

    # ── Notifications ─────────────────────────────────────

    async def list_notifications(self, db: AsyncSession, hr_id: str) -> List[Notification]:
        r = await db.execute(
            select(Notification)
            .where(Notification.hr_id == hr_id)
            .order_by(Notification.created_at.desc())
        )
        return r.scalars().all()

    async def get_notification(
        self, db: AsyncSession, notification_id: str, hr_id: str
    ) -> Optional[Notification]:
        r = await db.execute(
            select(Notification).where(
                Notification.id == notification_id,
                Notification.hr_id == hr_id,
            )
        )
        return r.scalar_one_or_none()

    async def list_unread(self, db: AsyncSession, hr_id: str) -> List[Notification]:
        r = await db.execute(
            select(Notification)
            .where(
                Notification.hr_id == hr_id,
                Notification.status == NotificationStatus.UNREAD,
            )
            .order_by(Notification.created_at.desc())
        )
        return r.scalars().all()

    async def count_unread(self, db: AsyncSession, hr_id: str) -> int:
        r = await db.execute(
            select(func.count(Notification.id)).where(
                Notification.hr_id == hr_id,
                Notification.status == NotificationStatus.UNREAD,
            )
        )
        return r.scalar() or 0

    async def update_status(
        self, db: AsyncSession, notification: Notification, status: NotificationStatus
    ) -> Notification:
        notification.status = status
        await db.commit()
        await db.refresh(notification)
        return notification

    async def create_notification(self, db: AsyncSession, data: Dict) -> Notification:
        db_obj = Notification(id=uuid.uuid4().hex, **data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    # ── Recherche ─────────────────────────────────────────

    async def search_users(
        self,
        db: AsyncSession,
        query: str,
        limit: int,
        role: Optional[UserRole] = None,
        hr_id: Optional[str] = None,
    ) -> List[User]:
        pattern = f"%{query}%"
        stmt = (
            select(User)
            .where(
                or_(User.name.ilike(pattern), User.email.ilike(pattern)),
            )
            .order_by(User.name)
            .limit(limit)
        )
        if role is not None:
            stmt = stmt.where(User.role == role)
        if hr_id is not None:
            stmt = stmt.where(User.hr_id == hr_id)
        r = await db.execute(stmt)
        return r.scalars().all()

    # ── Départements ──────────────────────────────────────

    async def get_employees(self, db: AsyncSession, hr_id: str) -> List[User]:
        r = await db.execute(
            select(User).where(User.hr_id == hr_id, User.role == UserRole.EMPLOYEE)
        )
        return r.scalars().all()

    async def get_reports_for_hr(self, db: AsyncSession, hr_id: str) -> List[IndividualEmployeeReport]:
        r = await db.execute(
            select(IndividualEmployeeReport)
            .where(IndividualEmployeeReport.hr_id == hr_id)
            .order_by(IndividualEmployeeReport.created_at.desc())
        )
        return r.scalars().all()

    # ── Annuaire ──────────────────────────────────────────

    async def get_employee(self, db: AsyncSession, user_id: str, hr_id: str) -> Optional[User]:
        r = await db.execute(
            select(User).where(User.id == user_id, User.hr_id == hr_id)
        )
        return r.scalar_one_or_none()

    async def get_reports_for_employee(
        self, db: AsyncSession, user_id: str, hr_id: str
    ) -> List[IndividualEmployeeReport]:
        r = await db.execute(
            select(IndividualEmployeeReport)
            .join(User, User.id == IndividualEmployeeReport.user_id)
            .where(IndividualEmployeeReport.user_id == user_id, User.hr_id == hr_id)
            .order_by(IndividualEmployeeReport.created_at.desc())
        )
        return r.scalars().all()
