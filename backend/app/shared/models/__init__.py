# app/shared/models/__init__.py
"""
Point d'entrée unique pour tous les modèles SQLAlchemy.

TOUJOURS importer les modèles depuis ce fichier :
  from app.shared.models import User, AssessmentProgress, ...

→ Garantit que tous les modèles sont enregistrés dans Base.metadata
  avant la création des tables (Alembic, create_all).
"""

from app.shared.models.User         import User, EmployeeProfile
from app.shared.models.Assessment   import AssessmentProgress
from app.shared.models.Report       import IndividualEmployeeReport
from app.shared.models.Notification import Notification

__all__ = [
    # User
    "User", "EmployeeProfile",
    # Assessment
    "AssessmentProgress",
    # Results
    "IndividualEmployeeReport",
    # HR
    "Notification",
]
