# engine/analytics/departments.py
"""
Agrégats par département pour le tableau de bord RH. ZÉRO accès DB.

Un employé compte dans son département courant (dernier de la liste).
Seul son rapport le plus récent entre dans les statistiques de score.
"""
import numpy as np
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

UNASSIGNED = "Unassigned"


@dataclass
class DepartmentStats:
    department: str
    employee_count: int
    completed_assessments: int
    completion_rate: float          # 0-100
    mean_genius_factor_score: Optional[float]
    std_genius_factor_score: Optional[float]

    def to_dict(self) -> Dict:
        return asdict(self)


def _department_of(employee: Dict) -> str:
    departments = employee.get("department") or []
    return departments[-1] if departments else UNASSIGNED


def compute_department_stats(employees: List[Dict], reports: List[Dict]) -> List[DepartmentStats]:
    """
    Args:
        employees: [{id, department: [str]}]
        reports:   [{user_id, genius_factor_score, created_at}], plus récent en premier
    """
    latest_score: Dict[str, Optional[float]] = {}
    for report in reports:
        latest_score.setdefault(report["user_id"], report.get("genius_factor_score"))

    groups: Dict[str, List[Dict]] = {}
    for employee in employees:
        groups.setdefault(_department_of(employee), []).append(employee)

    stats = []
    for department in sorted(groups):
        members = groups[department]
        completed = [e for e in members if e["id"] in latest_score]
        scores = [
            latest_score[e["id"]] for e in completed if latest_score[e["id"]] is not None
        ]
        stats.append(DepartmentStats(
            department=department,
            employee_count=len(members),
            completed_assessments=len(completed),
            completion_rate=round(len(completed) / len(members) * 100, 1),
            mean_genius_factor_score=round(float(np.mean(scores)), 1) if scores else None,
            std_genius_factor_score=round(float(np.std(scores)), 1) if len(scores) > 1 else None,
        ))
    return stats
