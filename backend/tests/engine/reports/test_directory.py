# tests/engine/reports/test_directory.py
"""
Tests unitaires pour engine.reports.directory

Couverture :
    - Recherche nom / email insensible à la casse
    - Département : appartenance à la liste, "All Departments" ignoré
    - Risque : retention_risk_level d'un rapport, "All Risk Levels" ignoré
    - Statut : Completed (avec ou sans risque), Not Started, inconnu → ValueError
    - Employés triés par id, rapports rattachés
    - Métriques sur le périmètre recherche + département
"""
import pytest

from app.engine.reports.directory import filter_employees, risk_level

pytestmark = pytest.mark.engine


def employees() -> list:
    return [
        {"id": "e3", "name": "Carla Diaz", "email": "carla@corp.com", "department": ["Sales"], "position": []},
        {"id": "e1", "name": "Alice Martin", "email": "alice@corp.com", "department": ["Engineering"], "position": []},
        {"id": "e2", "name": "Bob Stone", "email": "bob@corp.com", "department": ["Sales", "Engineering"], "position": []},
        {"id": "e4", "name": "Dan Roe", "email": "dan@corp.com", "department": ["Engineering"], "position": []},
    ]


def reports() -> list:
    return [
        {"id": 3, "user_id": "e2", "genius_factor_score": 71.0,
         "current_role_alignment_analysis": {"retention_risk_level": "High"}},
        {"id": 2, "user_id": "e1", "genius_factor_score": 80.0,
         "current_role_alignment_analysis": {"retention_risk_level": "Low"}},
        {"id": 1, "user_id": "e1", "genius_factor_score": None,
         "current_role_alignment_analysis": None},
    ]


def ids(result: dict) -> list:
    return [e["id"] for e in result["employees"]]


class TestFiltres:
    def test_sans_filtre_trie_par_id(self):
        result = filter_employees(employees(), reports())
        assert ids(result) == ["e1", "e2", "e3", "e4"]
        assert [r["id"] for r in result["employees"][0]["reports"]] == [2, 1]
        assert result["employees"][3]["reports"] == []

    def test_recherche_nom_et_email(self):
        assert ids(filter_employees(employees(), reports(), search=" ALICE ")) == ["e1"]
        assert ids(filter_employees(employees(), reports(), search="bob@")) == ["e2"]

    def test_departement_dans_la_liste(self):
        result = filter_employees(employees(), reports(), department="Engineering")
        assert ids(result) == ["e1", "e2", "e4"]

    def test_tous_les_departements(self):
        result = filter_employees(employees(), reports(), department="All Departments")
        assert len(result["employees"]) == 4

    def test_risque_seul(self):
        assert ids(filter_employees(employees(), reports(), risk="High")) == ["e2"]
        assert len(filter_employees(employees(), reports(), risk="All Risk Levels")["employees"]) == 4

    def test_completed(self):
        assert ids(filter_employees(employees(), reports(), status="Completed")) == ["e1", "e2"]

    def test_completed_avec_risque(self):
        assert ids(filter_employees(employees(), reports(), status="Completed", risk="Low")) == ["e1"]

    def test_not_started_ignore_le_risque(self):
        result = filter_employees(employees(), reports(), status="Not Started", risk="High")
        assert ids(result) == ["e3", "e4"]

    def test_statut_inconnu(self):
        with pytest.raises(ValueError, match="Invalid status"):
            filter_employees(employees(), reports(), status="In Progress")


class TestMetriques:
    def test_perimetre_complet(self):
        metrics = filter_employees(employees(), reports())["metrics"]
        assert metrics == {
            "total_assessments": 3,
            "completed_count": 2,
            "not_started_count": 2,
            "in_progress_count": 0,
            "avg_score": 76,
        }

    def test_perimetre_restreint_par_departement(self):
        metrics = filter_employees(employees(), reports(), department="Sales", status="Not Started")["metrics"]
        assert metrics["completed_count"] == 1
        assert metrics["not_started_count"] == 1

    def test_sans_rapport(self):
        metrics = filter_employees(employees(), [])["metrics"]
        assert metrics["avg_score"] == 0
        assert metrics["not_started_count"] == 4


class TestRiskLevel:
    def test_analyse_absente(self):
        assert risk_level({"current_role_alignment_analysis": None}) is None

    def test_niveau_present(self):
        assert risk_level({"current_role_alignment_analysis": {"retention_risk_level": "Medium"}}) == "Medium"
