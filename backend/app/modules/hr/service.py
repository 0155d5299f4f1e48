# modules/hr/service.py
"""
Orchestration du tableau de bord RH.

Responsabilités :
1. Notifications durables (liste, statut, tout marquer lu)
2. Fil fusionné du websocket : durables + poussées (engine/notifications/feed.py)
3. Relais des événements poussés vers le hub temps réel (jamais persistés)
4. Shell : navigation, métadonnées de page, compteur non lus
5. Suggestions de recherche et agrégats départements
6. Annuaire des employés et consultation de leurs rapports
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.content.hr_navigation import SIDEBAR, BOTTOM_NAVIGATION, get_page_metadata, is_active
from app.core.config import settings
from app.engine.analytics.departments import compute_department_stats
from app.engine.notifications.feed import NotificationFeed, is_socket_id
from app.engine.reports.directory import filter_employees
from app.engine.reports.gating import classify_tier
from app.engine.reports.selection import paginate, select_report, sort_reports
from app.infra.realtime import RealtimeEvent, RealtimeHub
from app.modules.hr.repository import HRRepository
from app.modules.hr.schemas import NotificationOut, PushEventIn
from app.modules.results.schemas import ReportOut
from app.shared.enums import NotificationStatus, RealtimeEventType, UserRole

logger = logging.getLogger(__name__)

repo = HRRepository()


def _serialize(notification) -> Dict:
    return NotificationOut.model_validate(notification).model_dump(mode="json")


def _employee(user) -> Dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "department": user.department or [],
        "position": user.position or [],
    }


def _report(report) -> Dict:
    return ReportOut.model_validate(report).model_dump()


def _parse_status(status: Optional[str]) -> NotificationStatus:
    if not status:
        raise ValueError("Notification id and status are required.")
    try:
        return NotificationStatus(status)
    except ValueError:
        raise ValueError(f"Invalid status: {status}. Expected 'read' or 'unread'.") from None


class HRService:

    # ── Notifications durables ────────────────────────────

    async def list_notifications(self, db: AsyncSession, hr) -> List[Dict]:
        """Plus récente en premier."""
        return [_serialize(n) for n in await repo.list_notifications(db, hr.id)]

    async def update_notification(
        self, db: AsyncSession, hr, notification_id: Optional[str], status: Optional[str]
    ) -> Dict:
        """ValueError si id/statut manquant ou invalide, LookupError si inconnu."""
        if not notification_id:
            raise ValueError("Notification id and status are required.")
        new_status = _parse_status(status)

        notification = await repo.get_notification(db, notification_id, hr.id)
        if notification is None:
            raise LookupError("Notification not found.")

        updated = await repo.update_status(db, notification, new_status)
        return _serialize(updated)

    async def mark_all_read(self, db: AsyncSession, hr) -> int:
        """Mise à jour séquentielle de chaque notification non lue."""
        unread = await repo.list_unread(db, hr.id)
        for notification in unread:
            await repo.update_status(db, notification, NotificationStatus.READ)
        return len(unread)

    # ── Fil du websocket ──────────────────────────────────

    async def open_feed(self, db: AsyncSession, hr) -> NotificationFeed:
        """Chargé une seule fois à la connexion."""
        return NotificationFeed(await self.list_notifications(db, hr))

    async def apply_client_action(self, db: AsyncSession, hr, feed: NotificationFeed, message: Any) -> None:
        """
        {"action": "mark", "id": ..., "status": ...}
        {"action": "mark_all_read"}

        Mise à jour optimiste du fil. Les ids durables sont persistés,
        les ids "socket-..." ne changent que localement.
        """
        if not isinstance(message, dict):
            raise ValueError("Invalid message")
        action = message.get("action")

        if action == "mark":
            notification_id = message.get("id")
            if not notification_id:
                raise ValueError("Notification id and status are required.")
            status = _parse_status(message.get("status"))
            feed.set_status(notification_id, status.value)
            if not is_socket_id(notification_id):
                await self.update_notification(db, hr, notification_id, status.value)
            return

        if action == "mark_all_read":
            changed = feed.mark_all_read()
            for notification in changed:
                if not is_socket_id(notification["id"]):
                    await self.update_notification(db, hr, notification["id"], NotificationStatus.READ.value)
            return

        raise ValueError(f"Unknown action: {action}")

    # ── Push temps réel ───────────────────────────────────

    def push(self, hub: RealtimeHub, payload: PushEventIn) -> int:
        """Relayé tel quel aux abonnés du hr_id, jamais écrit en base."""
        fields = payload.model_dump(exclude_none=True)
        event = RealtimeEvent(kind=RealtimeEventType.HR_NOTIFICATION, **fields)
        delivered = hub.publish(event)
        if delivered == 0:
            logger.info("Push hr_%s sans abonné connecté", payload.hr_id)
        return delivered

    # ── Shell ─────────────────────────────────────────────

    async def shell(self, db: AsyncSession, hr, path: str) -> Dict:
        def _items(entries):
            return [{**e, "active": is_active(e["href"], path)} for e in entries]

        return {
            "sidebar": _items(SIDEBAR),
            "bottom_navigation": _items(BOTTOM_NAVIGATION),
            "page": {"path": path, **get_page_metadata(path)},
            "unread_count": await repo.count_unread(db, hr.id),
        }

    # ── Recherche ─────────────────────────────────────────

    async def search_suggestions(self, db: AsyncSession, user, query: str) -> List:
        """HR → ses employés. Admin → les utilisateurs HR. Requête vide → []."""
        query = (query or "").strip()
        if not query:
            return []

        limit = settings.SEARCH_SUGGESTION_LIMIT
        if user.role == UserRole.HR:
            return await repo.search_users(db, query, limit, hr_id=user.id)
        if user.role == UserRole.ADMIN:
            return await repo.search_users(db, query, limit, role=UserRole.HR)
        return []

    # ── Départements ──────────────────────────────────────

    async def department_stats(self, db: AsyncSession, hr) -> List[Dict]:
        employees = await repo.get_employees(db, hr.id)
        reports = await repo.get_reports_for_hr(db, hr.id)

        stats = compute_department_stats(
            employees=[{"id": e.id, "department": e.department} for e in employees],
            reports=[
                {"user_id": r.user_id, "genius_factor_score": r.genius_factor_score}
                for r in reports
            ],
        )
        return [s.to_dict() for s in stats]

    # ── Annuaire ──────────────────────────────────────────

    async def list_employees(
        self,
        db: AsyncSession,
        hr,
        search: str = "",
        department: str = "",
        risk: str = "",
        status: str = "",
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> Dict:
        """Employés rattachés au RH, filtrés puis paginés. ValueError si status inconnu."""
        employees = await repo.get_employees(db, hr.id)
        reports = await repo.get_reports_for_hr(db, hr.id)

        directory = filter_employees(
            employees=[_employee(e) for e in employees],
            reports=[_report(r) for r in reports],
            search=search,
            department=department,
            risk=risk,
            status=status,
        )
        pagination = paginate(
            directory["employees"], page, page_size or settings.HR_EMPLOYEES_PAGE_SIZE
        )
        return {
            "employees": pagination.pop("items"),
            "metrics": directory["metrics"],
            **pagination,
        }

    async def employee_reports(
        self,
        db: AsyncSession,
        hr,
        user_id: str,
        report_id: Optional[int] = None,
        page: int = 1,
    ) -> Dict:
        """
        Rapports complets d'un employé du RH (pas de gating : la restriction
        non payante ne concerne que l'employé lui-même).
        LookupError si l'employé n'est pas rattaché à ce RH.
        """
        employee = await repo.get_employee(db, user_id, hr.id)
        if employee is None:
            raise LookupError("Employee not found.")

        reports = sort_reports([_report(r) for r in await repo.get_reports_for_employee(db, user_id, hr.id)])
        pagination = paginate(reports, page, settings.RESULTS_PAGE_SIZE)
        summaries = [
            {"id": r["id"], "created_at": r["created_at"], "genius_factor_score": r["genius_factor_score"]}
            for r in pagination.pop("items")
        ]
        selected = select_report(reports, report_id)

        return {
            "employee": {**_employee(employee), "reports": []},
            "report": selected,
            "tier": classify_tier(selected) if selected else None,
            "reports": summaries,
            **pagination,
        }
