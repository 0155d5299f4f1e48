# tests/modules/results/test_service.py
"""
Tests unitaires pour modules.results.service.ResultsService

Couverture :
    list_results() :
        - Payant → rapports complets, plus récent en premier
        - Non payant → projection réduite (sans sections premium)

    view_result() :
        - id demandé / id inconnu → plus récent
        - Aucun rapport → état vide
        - Non payant : sections verrouillées, preview → lecture seule
        - Pagination des résumés (RESULTS_PAGE_SIZE = 3)

    store_report() :
        - Employé inconnu → LookupError
        - hr_id / departement déduits de l'employé
"""
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock

from app.modules.results.schemas import ReportIn
from app.modules.results.service import ResultsService
from app.shared.enums import ReportTier, SectionState
from tests.conftest import make_user, make_report

pytestmark = pytest.mark.service

SERVICE = "app.modules.results.service"

service = ResultsService()


def _reports(n: int = 3) -> list:
    return [
        make_report(id=10 + i, created_at=datetime(2025, 1 + i, 1, tzinfo=timezone.utc))
        for i in range(n)
    ]


class TestListResults:
    @pytest.mark.asyncio
    async def test_payant_rapports_complets(self, mocker):
        mocker.patch(f"{SERVICE}.repo.list_reports", AsyncMock(return_value=_reports()))
        result = await service.list_results(AsyncMock(), make_user(paid=True))

        assert result["paid"] is True
        assert [r["id"] for r in result["reports"]] == [12, 11, 10]
        assert result["reports"][0]["internal_career_opportunities"] is not None

    @pytest.mark.asyncio
    async def test_non_payant_projection(self, mocker):
        mocker.patch(f"{SERVICE}.repo.list_reports", AsyncMock(return_value=_reports(1)))
        result = await service.list_results(AsyncMock(), make_user(paid=False))

        report = result["reports"][0]
        assert "internal_career_opportunities" not in report
        assert report["alignment_score"] == 74
        assert report["genius_factor_profile"]["weakness"] == ["Delegation"]


class TestViewResult:
    @pytest.mark.asyncio
    async def test_id_demande(self, mocker):
        mocker.patch(f"{SERVICE}.repo.list_reports", AsyncMock(return_value=_reports()))
        result = await service.view_result(AsyncMock(), make_user(paid=True), report_id=11)
        assert result["report"]["id"] == 11
        assert result["tier"] == ReportTier.PREMIUM

    @pytest.mark.asyncio
    async def test_id_inconnu_plus_recent(self, mocker):
        mocker.patch(f"{SERVICE}.repo.list_reports", AsyncMock(return_value=_reports()))
        result = await service.view_result(AsyncMock(), make_user(paid=True), report_id=999)
        assert result["report"]["id"] == 12

    @pytest.mark.asyncio
    async def test_aucun_rapport_etat_vide(self, mocker):
        mocker.patch(f"{SERVICE}.repo.list_reports", AsyncMock(return_value=[]))
        result = await service.view_result(AsyncMock(), make_user())
        assert result["report"] is None
        assert result["sections"] == []
        assert result["total_pages"] == 1

    @pytest.mark.asyncio
    async def test_non_payant_sections_verrouillees(self, mocker):
        mocker.patch(f"{SERVICE}.repo.list_reports", AsyncMock(return_value=_reports(1)))
        result = await service.view_result(AsyncMock(), make_user(paid=False))

        section = result["sections"][0]
        assert section["key"] == "internal_career_opportunities"
        assert section["state"] == SectionState.LOCKED
        assert section["content"] is None
        assert "internal_career_opportunities" not in result["report"]

    @pytest.mark.asyncio
    async def test_non_payant_apercu(self, mocker):
        mocker.patch(f"{SERVICE}.repo.list_reports", AsyncMock(return_value=_reports(1)))
        result = await service.view_result(AsyncMock(), make_user(paid=False), preview=True)

        assert result["preview"] is True
        section = result["sections"][0]
        assert section["state"] == SectionState.PREVIEW
        assert section["read_only"] is True

    @pytest.mark.asyncio
    async def test_apercu_ignore_si_payant(self, mocker):
        mocker.patch(f"{SERVICE}.repo.list_reports", AsyncMock(return_value=_reports(1)))
        result = await service.view_result(AsyncMock(), make_user(paid=True), preview=True)
        assert result["preview"] is False
        assert result["sections"][0]["state"] == SectionState.UNLOCKED

    @pytest.mark.asyncio
    async def test_pagination(self, mocker):
        mocker.patch(f"{SERVICE}.repo.list_reports", AsyncMock(return_value=_reports(5)))
        result = await service.view_result(AsyncMock(), make_user(paid=True), page=2)

        assert result["total"] == 5
        assert result["total_pages"] == 2
        assert [r["id"] for r in result["reports"]] == [11, 10]


class TestStoreReport:
    @pytest.mark.asyncio
    async def test_employe_inconnu(self, mocker):
        mocker.patch(f"{SERVICE}.repo.get_user", AsyncMock(return_value=None))
        with pytest.raises(LookupError):
            await service.store_report(AsyncMock(), ReportIn(user_id="ghost"))

    @pytest.mark.asyncio
    async def test_valeurs_deduites_de_l_employe(self, mocker):
        mocker.patch(
            f"{SERVICE}.repo.get_user",
            AsyncMock(return_value=make_user(department=["Sales", "Marketing"])),
        )
        create = mocker.patch(f"{SERVICE}.repo.create_report", AsyncMock(return_value=make_report()))

        result = await service.store_report(
            AsyncMock(), ReportIn(user_id="emp-1", genius_factor_score=82.0)
        )

        data = create.call_args.args[1]
        assert data["hr_id"] == "hr-1"
        assert data["departement"] == "Marketing"
        assert result["id"] == 1
