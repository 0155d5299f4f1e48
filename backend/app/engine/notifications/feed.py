# engine/notifications/feed.py
"""
Fil de notifications RH fusionné. ZÉRO accès DB.

Deux provenances dans une seule liste :
  - durables : lignes de la table notifications (id réel) ;
  - poussées : événements temps réel convertis, id "socket-<ts>-<rand>",
    jamais persistés.

Les poussées sont préfixées dans l'ordre d'arrivée (la plus récente en tête).
Statut : unread ↔ read, pas d'état "supprimé".

Appelé par : modules/hr/router.py (websocket), modules/hr/service.py
"""
import random
import string
import time
from datetime import datetime, timezone
from typing import Dict, List, Optional

from app.shared.enums import NotificationStatus

SOCKET_ID_PREFIX = "socket-"
_ID_ALPHABET = string.ascii_lowercase + string.digits


def is_socket_id(notification_id: str) -> bool:
    return notification_id.startswith(SOCKET_ID_PREFIX)


def make_socket_id() -> str:
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{SOCKET_ID_PREFIX}{int(time.time() * 1000)}-{suffix}"


def convert_socket_notification(event: Dict) -> Dict:
    """
    Événement poussé {type, user_id, hr_id, data: {...}, timestamp}
    → notification au format du fil.
    """
    data = event.get("data") or {}
    timestamp = event.get("timestamp") or datetime.now(timezone.utc).isoformat()
    return {
        "id": make_socket_id(),
        "message": data.get("message", ""),
        "hr_id": event.get("hr_id"),
        "employee_name": data.get("employeeName"),
        "employee_email": data.get("employeeEmail"),
        "status": data.get("status") or NotificationStatus.UNREAD.value,
        "created_at": timestamp,
        "type": event.get("type"),
        "data": data,
    }


class NotificationFeed:

    def __init__(self, durable: Optional[List[Dict]] = None):
        self.items: List[Dict] = list(durable or [])

    def prepend_pushed(self, event: Dict) -> Dict:
        notification = convert_socket_notification(event)
        self.items.insert(0, notification)
        return notification

    def get(self, notification_id: str) -> Optional[Dict]:
        return next((n for n in self.items if n["id"] == notification_id), None)

    def set_status(self, notification_id: str, status: str) -> Dict:
        """Lève LookupError si l'id est inconnu, ValueError si le statut est invalide."""
        status = NotificationStatus(status).value
        notification = self.get(notification_id)
        if notification is None:
            raise LookupError(f"Notification {notification_id} introuvable.")
        notification["status"] = status
        return notification

    def toggle(self, notification_id: str) -> Dict:
        notification = self.get(notification_id)
        if notification is None:
            raise LookupError(f"Notification {notification_id} introuvable.")
        current = notification["status"]
        new_status = (
            NotificationStatus.READ if current == NotificationStatus.UNREAD.value
            else NotificationStatus.UNREAD
        )
        return self.set_status(notification_id, new_status.value)

    def unread(self) -> List[Dict]:
        return [n for n in self.items if n["status"] == NotificationStatus.UNREAD.value]

    def mark_all_read(self) -> List[Dict]:
        """Retourne les notifications effectivement modifiées."""
        changed = self.unread()
        for notification in changed:
            notification["status"] = NotificationStatus.READ.value
        return changed

    def unread_count(self) -> int:
        return len(self.unread())

    def to_list(self) -> List[Dict]:
        return list(self.items)
