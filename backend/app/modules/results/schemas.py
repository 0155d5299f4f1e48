# app/modules/results/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
from datetime import datetime

from app.shared.enums import ReportTier, SectionState


# ── Rapport complet ────────────────────────────────────────

class ReportOut(BaseModel):
    id: int
    user_id: str
    hr_id: Optional[str] = None
    departement: Optional[str] = None
    executive_summary: Optional[str] = None
    genius_factor_score: Optional[float] = None
    genius_factor_profile: Optional[Dict[str, Any]] = None
    current_role_alignment_analysis: Optional[Dict[str, Any]] = None
    internal_career_opportunities: Optional[Any] = None
    retention_and_mobility_strategies: Optional[Any] = None
    development_action_plan: Optional[Any] = None
    personalized_resources: Optional[Any] = None
    data_sources_and_methodology: Optional[Any] = None
    risk_analysis: Optional[Any] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class ResultsListOut(BaseModel):
    paid: bool
    # Rapports complets (payant) ou projection réduite (non payant)
    reports: List[Dict[str, Any]]


# ── Vue d'un rapport ───────────────────────────────────────

class SectionOut(BaseModel):
    key: str
    state: SectionState
    read_only: bool
    content: Optional[Any] = None


class ReportSummaryOut(BaseModel):
    id: int
    created_at: Optional[datetime] = None
    genius_factor_score: Optional[float] = None


class ReportViewOut(BaseModel):
    paid: bool
    preview: bool
    report: Optional[Dict[str, Any]] = None     # None → état vide
    tier: Optional[ReportTier] = None
    sections: List[SectionOut] = []
    reports: List[ReportSummaryOut] = []        # page courante de la liste triée
    page: int
    page_size: int
    total: int
    total_pages: int


# ── Push du service d'analyse ──────────────────────────────

class ReportIn(BaseModel):
    user_id: str
    hr_id: Optional[str] = None
    departement: Optional[str] = None
    executive_summary: Optional[str] = None
    genius_factor_score: Optional[float] = Field(None, ge=0, le=100)
    genius_factor_profile: Optional[Dict[str, Any]] = None
    current_role_alignment_analysis: Optional[Dict[str, Any]] = None
    internal_career_opportunities: Optional[Any] = None
    retention_and_mobility_strategies: Optional[Any] = None
    development_action_plan: Optional[Any] = None
    personalized_resources: Optional[Any] = None
    data_sources_and_methodology: Optional[Any] = None
    risk_analysis: Optional[Any] = None
