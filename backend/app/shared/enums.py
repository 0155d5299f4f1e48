# app/shared/enums.py
"""
Toutes les énumérations du projet Genius Factor.

Source unique de vérité pour les statuts, rôles et types.
Importé par les modèles, schemas, services et engine.
"""

from enum import Enum

class UserRole(str, Enum):
    EMPLOYEE = "employee"
    HR       = "hr"       # Responsable RH d'un périmètre d'employés
    ADMIN    = "admin"


class NotificationStatus(str, Enum):
    UNREAD = "unread"
    READ   = "read"


class ReportTier(str, Enum):
    BASIC   = "basic"     # Sections optionnelles absentes
    PREMIUM = "premium"   # Au moins une section premium présente


class SectionState(str, Enum):
    ABSENT   = "absent"     # Objet manquant dans le rapport, quel que soit paid
    UNLOCKED = "unlocked"   # Présent + utilisateur payant
    LOCKED   = "locked"     # Présent + non payant
    PREVIEW  = "preview"    # Présent + non payant + aperçu demandé (lecture seule)


class RealtimeEventType(str, Enum):
    HR_NOTIFICATION   = "hr_notification"
    DASHBOARD_REFRESH = "dashboard_refresh"


class SubmissionStatus(str, Enum):
    SUCCESS = "success"
