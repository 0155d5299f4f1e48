# modules/results/service.py
"""
Rapports Genius Factor d'un employé.

Flux lecture :
1. Chargement des rapports (repository)
2. Sérialisation → dicts (ReportOut)
3. Sélection / tier / gating / pagination (engine/reports, pur)

Flux écriture : POST du service d'analyse (clé interne).
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.engine.reports.gating import classify_tier, render_sections, unpaid_projection
from app.engine.reports.selection import paginate, select_report, sort_reports
from app.modules.assessment.service import current_department
from app.modules.results.repository import ResultsRepository
from app.modules.results.schemas import ReportIn, ReportOut

logger = logging.getLogger(__name__)

repo = ResultsRepository()


class ResultsService:

    async def _load(self, db: AsyncSession, user_id: str) -> List[Dict]:
        rows = await repo.list_reports(db, user_id)
        return sort_reports([ReportOut.model_validate(r).model_dump() for r in rows])

    async def list_results(self, db: AsyncSession, user) -> Dict:
        reports = await self._load(db, user.id)
        paid = bool(user.paid)
        if not paid:
            reports = [unpaid_projection(r) for r in reports]
        return {"paid": paid, "reports": reports}

    async def view_result(
        self,
        db: AsyncSession,
        user,
        report_id: Optional[int] = None,
        page: int = 1,
        preview: bool = False,
    ) -> Dict:
        """
        preview n'a d'effet que pour un compte non payant :
        les sections verrouillées passent en lecture seule.
        """
        reports = await self._load(db, user.id)
        paid = bool(user.paid)
        pagination = paginate(reports, page, settings.RESULTS_PAGE_SIZE)
        summaries = [
            {"id": r["id"], "created_at": r["created_at"], "genius_factor_score": r["genius_factor_score"]}
            for r in pagination.pop("items")
        ]

        selected = select_report(reports, report_id)
        if selected is None:
            return {
                "paid": paid,
                "preview": preview,
                "report": None,
                "tier": None,
                "sections": [],
                "reports": summaries,
                **pagination,
            }

        tier = classify_tier(selected)
        sections = render_sections(selected, paid=paid, preview=preview)
        body = selected if paid else unpaid_projection(selected)

        return {
            "paid": paid,
            "preview": preview and not paid,
            "report": body,
            "tier": tier,
            "sections": sections,
            "reports": summaries,
            **pagination,
        }

    async def store_report(self, db: AsyncSession, payload: ReportIn) -> Dict:
        """Lève LookupError si l'employé est inconnu."""
        user = await repo.get_user(db, payload.user_id)
        if user is None:
            raise LookupError(f"Employé {payload.user_id} introuvable.")

        data = payload.model_dump()
        data["hr_id"] = data["hr_id"] or user.hr_id
        data["departement"] = data["departement"] or current_department(user)

        report = await repo.create_report(db, data)
        logger.info("Rapport %s enregistré pour %s", report.id, user.id)
        return ReportOut.model_validate(report).model_dump()
