# tests/modules/assessment/test_router.py
"""
Tests HTTP pour modules.assessment.router

Couverture :
    GET    /assessments/questions         → 200 / 402 / 400
    GET    /assessments/progress          sans auth → 401/403
    PUT    /assessments/progress          snapshot incohérent → 400
    DELETE /assessments/progress          sans confirm → 400, avec confirm → 200
    POST   /assessments/progress/answer   → 200 / NavigationError → 400
    POST   /assessments/progress/next     NavigationError → 400
    POST   /assessments/submit            → 200 / incomplet → 400 / scoring KO → 502
"""
import pytest
from unittest.mock import AsyncMock

from app.engine.assessment.eligibility import PaymentRequiredError, SUBSCRIPTION_REQUIRED_MESSAGE
from app.engine.assessment.navigator import AssessmentNavigator, NavigationError
from app.infra.analysis_client import AnalysisResponseError
from tests.conftest import small_parts

pytestmark = pytest.mark.router

ROUTER = "app.modules.assessment.router.service"


def _view(**kwargs) -> dict:
    view = {
        **AssessmentNavigator(small_parts()).to_view(),
        "answers": {},
        "time_spent_seconds": 0,
        "timestamp": None,
        "has_saved_progress": False,
    }
    view.update(kwargs)
    return view


# ── GET /assessments/questions ───────────────────────────────────────────────

@pytest.mark.asyncio
async def test_questions_200(employee_client, mocker):
    mocker.patch(
        f"{ROUTER}.get_questions",
        AsyncMock(return_value={
            "parts": small_parts(),
            "user_status": {"paid": False, "has_employee_profile": True, "is_profile_complete": True},
        }),
    )
    resp = await employee_client.get("/assessments/questions")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["parts"]) == 2
    assert body["parts"][0]["questions"][0]["section"] == "S1"


@pytest.mark.asyncio
async def test_questions_abonnement_402(employee_client, mocker):
    mocker.patch(
        f"{ROUTER}.get_questions",
        AsyncMock(side_effect=PaymentRequiredError(SUBSCRIPTION_REQUIRED_MESSAGE)),
    )
    resp = await employee_client.get("/assessments/questions")
    assert resp.status_code == 402
    assert resp.json()["detail"] == SUBSCRIPTION_REQUIRED_MESSAGE


@pytest.mark.asyncio
async def test_questions_profil_400(employee_client, mocker):
    mocker.patch(f"{ROUTER}.get_questions", AsyncMock(side_effect=ValueError("Employee profile not found.")))
    resp = await employee_client.get("/assessments/questions")
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_progress_sans_auth(client):
    resp = await client.get("/assessments/progress")
    assert resp.status_code in (401, 403)


# ── Progression ──────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_get_progress_200(employee_client, mocker):
    mocker.patch(f"{ROUTER}.get_progress", AsyncMock(return_value=_view()))
    resp = await employee_client.get("/assessments/progress")
    assert resp.status_code == 200
    assert resp.json()["question"]["id"] == 1


@pytest.mark.asyncio
async def test_put_progress_incoherent_400(employee_client, mocker):
    mocker.patch(f"{ROUTER}.save_progress", AsyncMock(side_effect=ValueError("Question inconnue : 99")))
    resp = await employee_client.put("/assessments/progress", json={
        "answers": {"99": "A) un"},
        "timestamp": "2025-01-01T12:00:00Z",
    })
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_put_progress_sans_timestamp_422(employee_client):
    resp = await employee_client.put("/assessments/progress", json={"answers": {}})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_reset_sans_confirmation_400(employee_client, mocker):
    mocker.patch(f"{ROUTER}.reset", AsyncMock(side_effect=ValueError("Reset requires confirmation (confirm=true).")))
    resp = await employee_client.delete("/assessments/progress")
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_reset_confirme_200(employee_client, mocker):
    reset = mocker.patch(f"{ROUTER}.reset", AsyncMock(return_value=True))
    resp = await employee_client.delete("/assessments/progress", params={"confirm": "true"})
    assert resp.status_code == 200
    assert resp.json() == {"cleared": True}
    assert reset.call_args.args[2] is True


# ── Navigation ───────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_answer_200(employee_client, mocker):
    answer = mocker.patch(
        f"{ROUTER}.answer",
        AsyncMock(return_value=_view(answers={1: "A) un"}, selected_option="A) un")),
    )
    resp = await employee_client.post("/assessments/progress/answer", json={"question_id": 1, "option": "A) un"})
    assert resp.status_code == 200
    assert resp.json()["selected_option"] == "A) un"
    assert answer.call_args.args[2:] == (1, "A) un")


@pytest.mark.asyncio
async def test_answer_question_non_courante_400(employee_client, mocker):
    mocker.patch(f"{ROUTER}.answer", AsyncMock(side_effect=NavigationError("Only the current question can be answered.")))
    resp = await employee_client.post("/assessments/progress/answer", json={"question_id": 3, "option": "A) un"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_next_sans_reponse_400(employee_client, mocker):
    message = "Please answer the current question before continuing."
    mocker.patch(f"{ROUTER}.next", AsyncMock(side_effect=NavigationError(message)))
    resp = await employee_client.post("/assessments/progress/next")
    assert resp.status_code == 400
    assert resp.json()["detail"] == message


@pytest.mark.asyncio
async def test_tick_hors_bornes_422(employee_client):
    resp = await employee_client.post("/assessments/progress/tick", json={"seconds": -1})
    assert resp.status_code == 422


# ── POST /assessments/submit ─────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_submit_200(employee_client, mocker):
    mocker.patch(f"{ROUTER}.submit", AsyncMock(return_value={
        "status": "success",
        "results": [{"part": "Part A", "majorityOptions": ["A"], "maxCount": 2}],
        "redirect_to": "/employee-dashboard/results",
        "redirect_delay_seconds": 3,
    }))
    resp = await employee_client.post("/assessments/submit")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    assert body["redirect_to"] == "/employee-dashboard/results"


@pytest.mark.asyncio
async def test_submit_incomplet_400(employee_client, mocker):
    mocker.patch(
        f"{ROUTER}.submit",
        AsyncMock(side_effect=ValueError("Please answer all questions before submitting (3 remaining).")),
    )
    resp = await employee_client.post("/assessments/submit")
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_submit_scoring_indisponible_502(employee_client, mocker):
    mocker.patch(
        f"{ROUTER}.submit",
        AsyncMock(side_effect=AnalysisResponseError("API request failed with status 500: boom", 500)),
    )
    resp = await employee_client.post("/assessments/submit")
    assert resp.status_code == 502
    assert "status 500" in resp.json()["detail"]
