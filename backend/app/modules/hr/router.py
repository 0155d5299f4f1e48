# modules/hr/router.py
"""
Endpoints du tableau de bord RH.

REST      : notifications durables, shell, recherche, départements, annuaire
Interne   : push d'un événement temps réel (clé interne)
WebSocket : fil fusionné durables + poussées, actions de lecture
"""
import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, WebSocket, WebSocketDisconnect, status

from app.engine.notifications.feed import NotificationFeed
from app.shared.deps import DbDep, HRDep, HubDep, InternalDep, get_user_from_token
from app.shared.enums import RealtimeEventType, UserRole
from app.modules.hr.service import HRService
from app.modules.hr.schemas import (
    NotificationOut,
    NotificationStatusIn,
    MarkAllReadOut,
    PushEventIn,
    PushOut,
    ShellOut,
    SuggestionsOut,
    DepartmentStatsOut,
    EmployeeDirectoryOut,
    EmployeeReportsOut,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hr", tags=["HR"])
service = HRService()


# ─────────────────────────────────────────────
# NOTIFICATIONS (REST)
# ─────────────────────────────────────────────

@router.get("/notifications", response_model=List[NotificationOut], summary="Notifications RH")
async def list_notifications(db: DbDep, current_user: HRDep):
    """Plus récente en premier."""
    return await service.list_notifications(db, current_user)


@router.put("/notifications", response_model=NotificationOut, summary="Changer le statut d'une notification")
async def update_notification(
    payload: NotificationStatusIn,
    db: DbDep,
    current_user: HRDep,
    id: Optional[str] = Query(None),
):
    try:
        return await service.update_notification(db, current_user, id, payload.status)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/notifications/read-all", response_model=MarkAllReadOut, summary="Tout marquer comme lu")
async def mark_all_read(db: DbDep, current_user: HRDep):
    return {"updated": await service.mark_all_read(db, current_user)}


@router.post(
    "/notifications/push",
    response_model=PushOut,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Événement temps réel (service d'analyse)",
)
async def push_notification(payload: PushEventIn, hub: HubDep, _: InternalDep):
    """Diffusé aux websockets du hr_id. Jamais persisté."""
    return {"delivered": service.push(hub, payload)}


# ─────────────────────────────────────────────
# NOTIFICATIONS (WEBSOCKET)
# ─────────────────────────────────────────────

def _feed_message(event: str, feed: NotificationFeed, **extra) -> dict:
    return {
        "event": event,
        "notifications": feed.to_list(),
        "unread_count": feed.unread_count(),
        **extra,
    }


@router.websocket("/notifications/ws")
async def notifications_ws(websocket: WebSocket, db: DbDep, hub: HubDep, token: str = Query("")):
    """
    Connexion : token du fournisseur d'auth en query (?token=).
    Envoie le fil durable une fois, puis chaque événement poussé
    converti et préfixé. Le client envoie des actions "mark" / "mark_all_read".
    """
    user = await get_user_from_token(token, db) if token else None
    if user is None or user.role not in (UserRole.HR, UserRole.ADMIN):
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    subscription = hub.subscribe(user.id)
    feed = await service.open_feed(db, user)
    await websocket.send_json(_feed_message("notifications", feed))

    async def forward_events():
        async for event in subscription:
            if event.kind == RealtimeEventType.DASHBOARD_REFRESH:
                await websocket.send_json({"event": "dashboard_refresh", "user_id": event.user_id})
                continue
            notification = feed.prepend_pushed(event.model_dump(mode="json"))
            await websocket.send_json(
                _feed_message("hr_notification", feed, notification=notification)
            )

    async def handle_client():
        while True:
            try:
                # JSON illisible : ValueError, la connexion reste ouverte
                message = await websocket.receive_json()
                await service.apply_client_action(db, user, feed, message)
            except (ValueError, LookupError) as e:
                await websocket.send_json({"event": "error", "detail": str(e)})
                continue
            await websocket.send_json(_feed_message("notifications", feed))

    tasks = [asyncio.create_task(forward_events()), asyncio.create_task(handle_client())]
    try:
        done, _pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            exc = task.exception()
            if exc is not None and not isinstance(exc, WebSocketDisconnect):
                raise exc
    finally:
        hub.unsubscribe(subscription)
        for task in tasks:
            task.cancel()
        logger.info("Websocket RH fermé : %s", user.id)


# ─────────────────────────────────────────────
# SHELL / RECHERCHE / DÉPARTEMENTS
# ─────────────────────────────────────────────

@router.get("/shell", response_model=ShellOut, summary="Navigation + métadonnées de page")
async def get_shell(db: DbDep, current_user: HRDep, path: str = Query("/hr-dashboard")):
    return await service.shell(db, current_user, path)


@router.get("/search-suggestions", response_model=SuggestionsOut, summary="Suggestions de recherche")
async def search_suggestions(db: DbDep, current_user: HRDep, q: str = Query("")):
    return {"suggestions": await service.search_suggestions(db, current_user, q)}


@router.get("/departments", response_model=List[DepartmentStatsOut], summary="Statistiques par département")
async def department_stats(db: DbDep, current_user: HRDep):
    return await service.department_stats(db, current_user)


# ─────────────────────────────────────────────
# ANNUAIRE DES EMPLOYÉS
# ─────────────────────────────────────────────

@router.get("/employees", response_model=EmployeeDirectoryOut, summary="Employés du RH (filtres + pagination)")
async def list_employees(
    db: DbDep,
    current_user: HRDep,
    search: str = Query(""),
    department: str = Query("", description="'All Departments' = pas de filtre"),
    risk: str = Query("", description="retention_risk_level ; 'All Risk Levels' = pas de filtre"),
    employee_status: str = Query("", alias="status", description="Completed / Not Started"),
    page: int = Query(1),
    limit: Optional[int] = Query(None, ge=1, le=100),
):
    try:
        return await service.list_employees(
            db, current_user,
            search=search, department=department, risk=risk, status=employee_status,
            page=page, page_size=limit,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get(
    "/employees/{user_id}/reports",
    response_model=EmployeeReportsOut,
    summary="Rapports d'un employé du RH",
)
async def employee_reports(
    user_id: str,
    db: DbDep,
    current_user: HRDep,
    id: Optional[int] = Query(None, description="Rapport demandé ; sinon le plus récent"),
    page: int = Query(1),
):
    try:
        return await service.employee_reports(db, current_user, user_id, report_id=id, page=page)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
