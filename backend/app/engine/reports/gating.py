# engine/reports/gating.py
"""
Accès aux sections d'un rapport selon l'abonnement. ZÉRO accès DB.

Sections toujours visibles : executive_summary, genius_factor_score,
genius_factor_profile, current_role_alignment_analysis.

Sections premium (PREMIUM_SECTIONS), état par section :
  absent    objet manquant, quel que soit paid
  unlocked  présent + paid
  locked    présent + non paid, contenu masqué
  preview   présent + non paid + aperçu demandé (lecture seule,
            aucun droit accordé)

Le tier (BASIC | PREMIUM) est décidé une seule fois à partir de la
présence des sections premium, jamais recalculé au rendu.
"""
from typing import Any, Dict, List

from app.shared.enums import ReportTier, SectionState

PREMIUM_SECTIONS = (
    "internal_career_opportunities",
    "retention_and_mobility_strategies",
    "development_action_plan",
    "personalized_resources",
    "data_sources_and_methodology",
    "risk_analysis",
)

# Clés possibles du score d'alignement dans current_role_alignment_analysis
ALIGNMENT_SCORE_KEYS = ("alignment_score", "score", "overall_score")


def _is_present(value: Any) -> bool:
    return value is not None and value != {} and value != []


def classify_tier(report: Dict) -> ReportTier:
    if any(_is_present(report.get(key)) for key in PREMIUM_SECTIONS):
        return ReportTier.PREMIUM
    return ReportTier.BASIC


def section_state(report: Dict, key: str, paid: bool, preview: bool) -> SectionState:
    if not _is_present(report.get(key)):
        return SectionState.ABSENT
    if paid:
        return SectionState.UNLOCKED
    if preview:
        return SectionState.PREVIEW
    return SectionState.LOCKED


def render_sections(report: Dict, paid: bool, preview: bool = False) -> List[Dict]:
    """
    [{key, state, read_only, content}] pour chaque section premium.
    content est None pour absent et locked.
    """
    sections = []
    for key in PREMIUM_SECTIONS:
        state = section_state(report, key, paid, preview)
        visible = state in (SectionState.UNLOCKED, SectionState.PREVIEW)
        sections.append({
            "key": key,
            "state": state,
            "read_only": state == SectionState.PREVIEW,
            "content": report.get(key) if visible else None,
        })
    return sections


def extract_alignment_score(report: Dict):
    analysis = report.get("current_role_alignment_analysis") or {}
    for key in ALIGNMENT_SCORE_KEYS:
        if analysis.get(key) is not None:
            return analysis[key]
    return None


def unpaid_projection(report: Dict) -> Dict:
    """Vue réduite d'un rapport pour un compte non payant."""
    profile = report.get("genius_factor_profile") or {}
    return {
        "id": report.get("id"),
        "created_at": report.get("created_at"),
        "updated_at": report.get("updated_at"),
        "user_id": report.get("user_id"),
        "genius_factor_score": report.get("genius_factor_score"),
        "alignment_score": extract_alignment_score(report),
        "genius_factor_profile": {
            "primary_genius_factor": profile.get("primary_genius_factor", ""),
            "secondary_genius_factor": profile.get("secondary_genius_factor", ""),
            "key_strengths": profile.get("key_strengths", []),
            "weakness": profile.get("weakness") or profile.get("weaknesses") or [],
            "description": profile.get("description", ""),
            "secondary_description": profile.get("secondary_description", ""),
        },
        "executive_summary": report.get("executive_summary"),
    }
