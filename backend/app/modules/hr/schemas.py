# app/modules/hr/schemas.py
from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Any, Dict, List, Optional
from datetime import datetime

from app.modules.results.schemas import ReportOut, ReportSummaryOut
from app.shared.enums import NotificationStatus, ReportTier, UserRole


# ── Notifications ──────────────────────────────────────────

class NotificationOut(BaseModel):
    id: str
    message: str
    hr_id: str
    employee_name: Optional[str] = None
    employee_email: Optional[str] = None
    status: NotificationStatus
    created_at: Optional[datetime] = None
    type: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    model_config = ConfigDict(from_attributes=True)


class NotificationStatusIn(BaseModel):
    # Optionnel ici : l'absence est un 400 métier, pas un 422
    status: Optional[str] = None


class MarkAllReadOut(BaseModel):
    updated: int


class PushEventIn(BaseModel):
    """Événement poussé par le service d'analyse."""
    type: Optional[str] = None
    user_id: Optional[str] = None
    hr_id: str
    data: Dict[str, Any] = {}
    timestamp: Optional[datetime] = None


class PushOut(BaseModel):
    delivered: int


# ── Shell ──────────────────────────────────────────────────

class NavItemOut(BaseModel):
    name: str
    href: str
    icon: str
    active: bool


class PageOut(BaseModel):
    path: str
    title: str
    subtitle: str


class ShellOut(BaseModel):
    sidebar: List[NavItemOut]
    bottom_navigation: List[NavItemOut]
    page: PageOut
    unread_count: int


# ── Recherche / Départements ───────────────────────────────

class SuggestionOut(BaseModel):
    id: str
    name: str
    email: EmailStr
    role: UserRole
    model_config = ConfigDict(from_attributes=True)


class SuggestionsOut(BaseModel):
    suggestions: List[SuggestionOut]


class DepartmentStatsOut(BaseModel):
    department: str
    employee_count: int
    completed_assessments: int
    completion_rate: float
    mean_genius_factor_score: Optional[float] = None
    std_genius_factor_score: Optional[float] = None


# ── Annuaire des employés ──────────────────────────────────

class EmployeeOut(BaseModel):
    id: str
    name: str
    email: str
    department: List[str] = []
    position: List[str] = []
    reports: List[ReportOut] = []


class DirectoryMetricsOut(BaseModel):
    total_assessments: int
    completed_count: int
    not_started_count: int
    in_progress_count: int
    avg_score: int


class EmployeeDirectoryOut(BaseModel):
    employees: List[EmployeeOut]
    metrics: DirectoryMetricsOut
    page: int
    page_size: int
    total: int
    total_pages: int


class EmployeeReportsOut(BaseModel):
    employee: EmployeeOut
    report: Optional[ReportOut] = None      # None → aucun rapport
    tier: Optional[ReportTier] = None
    reports: List[ReportSummaryOut] = []    # page courante de la liste triée
    page: int
    page_size: int
    total: int
    total_pages: int
