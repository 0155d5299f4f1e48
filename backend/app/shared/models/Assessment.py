# app/shared/models/Assessment.py
"""
Progression d'un assessment en cours.

Une seule ligne par utilisateur (PK user_id), écrasée à chaque changement
d'état : réponse, navigation, tick du chronomètre.

answers (JSON) : {"<question_id>": "A) texte complet de l'option", ...}
  Clés en str (JSON n'a pas de clés entières).

timestamp : instant client de la sauvegarde. Une sauvegarde plus ancienne
que celle stockée est ignorée.
"""
from sqlalchemy import Column, Integer, String, DateTime, JSON, ForeignKey
from sqlalchemy.sql import func

from app.core.database import Base


class AssessmentProgress(Base):
    __tablename__ = "assessment_progress"

    user_id = Column(String, ForeignKey("users.id"), primary_key=True)

    answers                = Column(JSON, nullable=False, default=dict)
    current_part_index     = Column(Integer, nullable=False, default=0)
    current_question_index = Column(Integer, nullable=False, default=0)
    time_spent_seconds     = Column(Integer, nullable=False, default=0)
    timestamp              = Column(DateTime(timezone=True), nullable=False)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return (
            f"<AssessmentProgress user={self.user_id} "
            f"pos=({self.current_part_index},{self.current_question_index})>"
        )
