# engine/reports/directory.py
"""
Annuaire des employés d'un RH. ZÉRO accès DB.

Filtres (tous optionnels, cumulables) :
  search     : nom ou email, insensible à la casse
  department : l'employé a ce département dans sa liste
  risk       : au moins un rapport avec ce retention_risk_level
  status     : "Completed" (au moins un rapport) / "Not Started" (aucun)

Avec status="Completed", le filtre risk restreint les rapports qui comptent.
Avec status="Not Started", il est sans effet : ces employés n'ont aucun rapport.

Les métriques portent sur le périmètre search + department uniquement.
"""
import numpy as np
from typing import Dict, List, Optional, Set

ALL_DEPARTMENTS = "All Departments"
ALL_RISK_LEVELS = "All Risk Levels"

COMPLETED = "Completed"
NOT_STARTED = "Not Started"
STATUSES = (COMPLETED, NOT_STARTED)


def risk_level(report: Dict) -> Optional[str]:
    analysis = report.get("current_role_alignment_analysis")
    if not isinstance(analysis, dict):
        return None
    return analysis.get("retention_risk_level")


def _matches_search(employee: Dict, search: str) -> bool:
    needle = search.lower()
    return any(
        needle in (employee.get(field) or "").lower()
        for field in ("name", "email")
    )


def _user_ids(reports: List[Dict], risk: str = "") -> Set[str]:
    return {
        r["user_id"] for r in reports
        if not risk or risk_level(r) == risk
    }


def filter_employees(
    employees: List[Dict],
    reports: List[Dict],
    search: str = "",
    department: str = "",
    risk: str = "",
    status: str = "",
) -> Dict:
    """
    Args:
        employees: [{id, name, email, department: [str], position: [str]}]
        reports:   [{id, user_id, genius_factor_score, current_role_alignment_analysis, ...}],
                   plus récent en premier

    Returns:
        {"employees": [...], "metrics": {...}}, employés triés par id,
        chacun avec ses rapports (plus récent en premier).

    Lève ValueError pour un status inconnu.
    """
    search = (search or "").strip()
    if department == ALL_DEPARTMENTS:
        department = ""
    if risk == ALL_RISK_LEVELS:
        risk = ""
    if status and status not in STATUSES:
        raise ValueError(f"Invalid status: {status}. Expected one of {', '.join(STATUSES)}.")

    scope = [
        e for e in employees
        if (not search or _matches_search(e, search))
        and (not department or department in (e.get("department") or []))
    ]

    with_report = _user_ids(reports)
    if status == COMPLETED:
        allowed = _user_ids(reports, risk)
        selected = [e for e in scope if e["id"] in allowed]
    elif status == NOT_STARTED:
        selected = [e for e in scope if e["id"] not in with_report]
    elif risk:
        allowed = _user_ids(reports, risk)
        selected = [e for e in scope if e["id"] in allowed]
    else:
        selected = scope

    by_user: Dict[str, List[Dict]] = {}
    for report in reports:
        by_user.setdefault(report["user_id"], []).append(report)

    scores = [r["genius_factor_score"] for r in reports if r.get("genius_factor_score") is not None]
    completed = sum(1 for e in scope if e["id"] in with_report)

    return {
        "employees": [
            {**e, "reports": by_user.get(e["id"], [])}
            for e in sorted(selected, key=lambda e: e["id"])
        ],
        "metrics": {
            "total_assessments": len(reports),
            "completed_count": completed,
            "not_started_count": len(scope) - completed,
            "in_progress_count": 0,
            "avg_score": int(round(float(np.mean(scores)))) if scores else 0,
        },
    }
