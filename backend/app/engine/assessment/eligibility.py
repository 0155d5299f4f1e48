# engine/assessment/eligibility.py
"""
Conditions d'accès à l'assessment. ZÉRO accès DB.

Ordre des contrôles (le premier qui échoue l'emporte) :
  1. non payant + rapport existant → PaymentRequiredError (402)
  2. pas de profil employé         → ValueError (400)
  3. department / position / skills manquants → ValueError (400)
"""
from typing import Any, List, Optional

SUBSCRIPTION_REQUIRED_MESSAGE = "Subscribe to attempt assessment multiple times"
PROFILE_NOT_FOUND_MESSAGE = "Employee profile not found. Please complete your profile setup."


class PaymentRequiredError(Exception):
    """Nouvelle tentative réservée aux comptes payants (→ 402)."""


class ProfileIncompleteError(ValueError):
    def __init__(self, message: str, missing_fields: List[str]):
        super().__init__(message)
        self.missing_fields = missing_fields


def has_valid_skills(skills: Any) -> bool:
    """skills est un JSON libre : liste, chaîne ou objet."""
    if not skills:
        return False
    if isinstance(skills, str):
        return skills.strip() != ""
    if isinstance(skills, (list, dict)):
        return len(skills) > 0
    return False


def missing_profile_fields(department: Any, position: Any, skills: Any) -> List[str]:
    missing = []
    if not (isinstance(department, list) and department):
        missing.append("department")
    if not (isinstance(position, list) and position):
        missing.append("position")
    if not has_valid_skills(skills):
        missing.append("skills")
    return missing


def profile_error_message(missing: List[str]) -> str:
    labels = {
        "department": "your department",
        "position": "your position",
        "skills": "at least one skill",
    }
    message = "Complete your profile before taking assessment"
    if missing:
        message += ". Please add: " + ", ".join(labels[f] for f in missing)
    return message


def check_eligibility(
    paid: bool,
    has_existing_report: bool,
    profile_skills: Optional[Any],
    has_profile: bool,
    department: Any,
    position: Any,
) -> None:
    """Lève l'erreur du premier contrôle qui échoue, sinon ne retourne rien."""
    if not paid and has_existing_report:
        raise PaymentRequiredError(SUBSCRIPTION_REQUIRED_MESSAGE)
    if not has_profile:
        raise ValueError(PROFILE_NOT_FOUND_MESSAGE)

    missing = missing_profile_fields(department, position, profile_skills)
    if missing:
        raise ProfileIncompleteError(profile_error_message(missing), missing)
