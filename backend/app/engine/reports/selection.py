# engine/reports/selection.py
"""
Sélection et pagination des rapports d'un employé. ZÉRO accès DB.

Règle de sélection :
  1. un id demandé qui correspond à un rapport connu ;
  2. sinon le rapport le plus récent (created_at décroissant) ;
  3. sinon None → état vide côté rendu.

Pagination : découpe de la liste triée, taille de page fixe,
page bornée à [1, total_pages].
"""
import math
from datetime import datetime, timezone
from typing import Dict, List, Optional

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _created_at(report: Dict) -> datetime:
    value = report.get("created_at")
    if value is None:
        return _EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def sort_reports(reports: List[Dict]) -> List[Dict]:
    """Plus récent en premier."""
    return sorted(reports, key=_created_at, reverse=True)


def select_report(reports: List[Dict], report_id: Optional[int] = None) -> Optional[Dict]:
    if not reports:
        return None
    if report_id is not None:
        for report in reports:
            if report.get("id") == report_id:
                return report
    return sort_reports(reports)[0]


def paginate(items: List, page: int, page_size: int) -> Dict:
    if page_size < 1:
        raise ValueError("page_size doit être ≥ 1")

    total = len(items)
    total_pages = max(1, math.ceil(total / page_size))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * page_size

    return {
        "items": items[start:start + page_size],
        "page": page,
        "page_size": page_size,
        "total": total,
        "total_pages": total_pages,
    }
