# tests/modules/results/test_repository.py
"""
Tests unitaires pour modules.results.repository.ResultsRepository

Couverture :
    - create_report() : insertion, id attribué au refresh
"""
import pytest

from app.modules.results.repository import ResultsRepository
from tests.conftest import make_async_db

pytestmark = pytest.mark.service


class TestCreateReport:
    @pytest.mark.asyncio
    async def test_creation_rapport(self):
        db = make_async_db()

        report = await ResultsRepository().create_report(db, {
            "user_id": "emp-1",
            "hr_id": "hr-1",
            "departement": "Engineering",
            "genius_factor_score": 82.0,
        })

        assert db.added_objects == [report]
        assert report.id == 1
        assert report.genius_factor_score == 82.0
        db.commit.assert_awaited_once()
