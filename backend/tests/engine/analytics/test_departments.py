# tests/engine/analytics/test_departments.py
"""
Tests unitaires pour engine.analytics.departments.compute_department_stats()

Couverture :
    - Regroupement par département courant (dernier de la liste)
    - Taux de complétion, moyenne / écart-type des scores (numpy)
    - Seul le rapport le plus récent d'un employé compte
    - Employé sans département → "Unassigned"
    - Un seul score → std None
"""
import pytest

from app.engine.analytics.departments import compute_department_stats, UNASSIGNED

pytestmark = pytest.mark.engine


def employees() -> list:
    return [
        {"id": "e1", "department": ["Sales", "Engineering"]},
        {"id": "e2", "department": ["Engineering"]},
        {"id": "e3", "department": ["Engineering"]},
        {"id": "e4", "department": ["Sales"]},
        {"id": "e5", "department": []},
    ]


class TestComputeDepartmentStats:
    def test_regroupement_et_completion(self):
        reports = [
            {"user_id": "e1", "genius_factor_score": 80.0},
            {"user_id": "e2", "genius_factor_score": 60.0},
        ]
        stats = {s.department: s for s in compute_department_stats(employees(), reports)}

        eng = stats["Engineering"]
        assert eng.employee_count == 3
        assert eng.completed_assessments == 2
        assert eng.completion_rate == 66.7
        assert eng.mean_genius_factor_score == 70.0
        assert eng.std_genius_factor_score == 10.0

        assert stats["Sales"].completed_assessments == 0
        assert stats["Sales"].mean_genius_factor_score is None

    def test_rapport_le_plus_recent_seulement(self):
        reports = [
            {"user_id": "e4", "genius_factor_score": 90.0},   # plus récent
            {"user_id": "e4", "genius_factor_score": 10.0},
        ]
        stats = {s.department: s for s in compute_department_stats(employees(), reports)}
        assert stats["Sales"].mean_genius_factor_score == 90.0
        assert stats["Sales"].std_genius_factor_score is None

    def test_sans_departement(self):
        stats = {s.department: s for s in compute_department_stats(employees(), [])}
        assert stats[UNASSIGNED].employee_count == 1

    def test_ordre_alphabetique(self):
        names = [s.department for s in compute_department_stats(employees(), [])]
        assert names == sorted(names)

    def test_aucun_employe(self):
        assert compute_department_stats([], []) == []

    def test_to_dict(self):
        stat = compute_department_stats([{"id": "e1", "department": ["Ops"]}], [])[0]
        assert stat.to_dict()["department"] == "Ops"
