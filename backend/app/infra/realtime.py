# infra/realtime.py
"""
Canal temps réel RH, en mémoire (un seul processus uvicorn).

RealtimeHub
  subscribe(hr_id)        → Subscription (itérateur async d'événements)
  unsubscribe(sub)        ferme l'itération
  publish(event)          diffuse à tous les abonnés du même hr_id
  emit_dashboard_refresh  raccourci après une soumission

Chaque abonné possède sa propre file bornée : quand elle est pleine,
l'événement le plus ancien est abandonné. Pas de déduplication entre
abonnés d'un même hr_id.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.core.config import settings
from app.shared.enums import RealtimeEventType

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RealtimeEvent(BaseModel):
    """
    kind : canal logique (notification RH ou refresh du dashboard).
    type : type métier libre transmis par l'émetteur ("assessment_completed"...).
    """
    kind: RealtimeEventType = RealtimeEventType.HR_NOTIFICATION
    type: Optional[str] = None
    hr_id: str
    user_id: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=_utcnow)


class Subscription:

    _CLOSED = object()

    def __init__(self, hr_id: str, maxsize: int):
        self.hr_id = hr_id
        self.queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self.closed = False
        self.dropped = 0

    def push(self, event: RealtimeEvent) -> None:
        if self.closed:
            return
        if self.queue.full():
            self.queue.get_nowait()
            self.dropped += 1
        self.queue.put_nowait(event)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self.queue.full():
            self.queue.get_nowait()
        self.queue.put_nowait(self._CLOSED)

    def __aiter__(self):
        return self

    async def __anext__(self) -> RealtimeEvent:
        item = await self.queue.get()
        if item is self._CLOSED:
            raise StopAsyncIteration
        return item


class RealtimeHub:

    def __init__(self, maxsize: int = 100):
        self.maxsize = maxsize
        self._subscribers: Dict[str, List[Subscription]] = {}

    def subscribe(self, hr_id: str) -> Subscription:
        """Un nouvel abonnement peut toujours être ouvert après unsubscribe."""
        subscription = Subscription(hr_id, self.maxsize)
        self._subscribers.setdefault(hr_id, []).append(subscription)
        logger.info("Abonnement temps réel ouvert : hr_%s", hr_id)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        subs = self._subscribers.get(subscription.hr_id, [])
        if subscription in subs:
            subs.remove(subscription)
            logger.info("Abonnement temps réel fermé : hr_%s", subscription.hr_id)
        if not subs:
            self._subscribers.pop(subscription.hr_id, None)
        subscription.close()

    def subscriber_count(self, hr_id: str) -> int:
        return len(self._subscribers.get(hr_id, []))

    def publish(self, event: RealtimeEvent) -> int:
        """Retourne le nombre d'abonnés ayant reçu l'événement."""
        subs = list(self._subscribers.get(event.hr_id, []))
        for subscription in subs:
            subscription.push(event)
        logger.debug("Événement %s publié vers %d abonné(s) hr_%s", event.kind, len(subs), event.hr_id)
        return len(subs)

    def emit_dashboard_refresh(self, hr_id: str, user_id: Optional[str] = None) -> int:
        return self.publish(RealtimeEvent(
            kind=RealtimeEventType.DASHBOARD_REFRESH,
            type=RealtimeEventType.DASHBOARD_REFRESH.value,
            hr_id=hr_id,
            user_id=user_id,
        ))


hub = RealtimeHub(maxsize=settings.REALTIME_QUEUE_SIZE)


def get_realtime_hub() -> RealtimeHub:
    """Dépendance FastAPI, surchargée dans les tests."""
    return hub
