# app/shared/models/Notification.py
"""
Notifications RH durables.

Les notifications poussées en temps réel (id "socket-...") ne passent
jamais par cette table : seules les lignes créées ici sont persistées.
"""
from sqlalchemy import Column, String, DateTime, JSON, Text, Enum as SAEnum
from sqlalchemy.sql import func

from app.core.database import Base
from app.shared.enums import NotificationStatus


class Notification(Base):
    __tablename__ = "notifications"

    id      = Column(String, primary_key=True, index=True)   # uuid4 hex
    hr_id   = Column(String, nullable=False, index=True)
    message = Column(Text, nullable=False)

    employee_name  = Column(String, nullable=True)
    employee_email = Column(String, nullable=True)
    type           = Column(String, nullable=True)
    data           = Column(JSON, nullable=True)

    status = Column(
        SAEnum(NotificationStatus, name="notificationstatus", values_callable=lambda e: [m.value for m in e]),
        default=NotificationStatus.UNREAD,
        nullable=False, index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    def __repr__(self):
        return f"<Notification id={self.id} hr={self.hr_id} status={self.status}>"
