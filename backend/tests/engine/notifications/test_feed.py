# tests/engine/notifications/test_feed.py
"""
Tests unitaires pour engine.notifications.feed

Couverture :
    - convert_socket_notification() : id "socket-", statut unread par défaut, champs data
    - NotificationFeed : fusion 2 durables + 1 poussée → 3, poussée en tête
    - Ordre d'arrivée des poussées (la plus récente en tête)
    - set_status / toggle : unread ↔ read, id inconnu → LookupError, statut invalide → ValueError
    - mark_all_read() : retourne les notifications modifiées, compteur à 0
"""
import re
import pytest

from app.engine.notifications.feed import (
    NotificationFeed,
    convert_socket_notification,
    is_socket_id,
    make_socket_id,
)

pytestmark = pytest.mark.engine


def durable(id: str, status: str = "unread") -> dict:
    return {"id": id, "message": f"msg {id}", "hr_id": "hr-1", "status": status}


def pushed_event(message: str = "Assessment in progress", **data) -> dict:
    return {
        "type": "assessment_progress",
        "user_id": "emp-1",
        "hr_id": "hr-1",
        "data": {"message": message, "employeeName": "Jane", "employeeEmail": "jane@test.com", **data},
        "timestamp": "2025-01-01T12:00:00+00:00",
    }


class TestSocketIds:
    def test_format(self):
        assert re.fullmatch(r"socket-\d+-[a-z0-9]{9}", make_socket_id())

    def test_ids_distincts(self):
        assert make_socket_id() != make_socket_id()

    def test_is_socket_id(self):
        assert is_socket_id("socket-1-abc") is True
        assert is_socket_id("5f2c") is False


class TestConvert:
    def test_champs_convertis(self):
        n = convert_socket_notification(pushed_event())
        assert n["id"].startswith("socket-")
        assert n["message"] == "Assessment in progress"
        assert n["employee_name"] == "Jane"
        assert n["employee_email"] == "jane@test.com"
        assert n["hr_id"] == "hr-1"
        assert n["type"] == "assessment_progress"
        assert n["created_at"] == "2025-01-01T12:00:00+00:00"

    def test_statut_unread_par_defaut(self):
        assert convert_socket_notification(pushed_event())["status"] == "unread"

    def test_statut_fourni_conserve(self):
        assert convert_socket_notification(pushed_event(status="read"))["status"] == "read"


class TestMerge:
    def test_deux_durables_une_poussee(self):
        feed = NotificationFeed([durable("a"), durable("b")])
        feed.prepend_pushed(pushed_event())
        items = feed.to_list()
        assert len(items) == 3
        assert items[0]["id"].startswith("socket-")
        assert [n["id"] for n in items[1:]] == ["a", "b"]

    def test_ordre_d_arrivee(self):
        feed = NotificationFeed([durable("a")])
        feed.prepend_pushed(pushed_event("first"))
        feed.prepend_pushed(pushed_event("second"))
        assert [n["message"] for n in feed.to_list()] == ["second", "first", "msg a"]


class TestStatus:
    def test_toggle_aller_retour(self):
        feed = NotificationFeed([durable("a")])
        assert feed.toggle("a")["status"] == "read"
        assert feed.toggle("a")["status"] == "unread"

    def test_id_inconnu(self):
        with pytest.raises(LookupError):
            NotificationFeed([durable("a")]).set_status("zzz", "read")

    def test_statut_invalide(self):
        with pytest.raises(ValueError):
            NotificationFeed([durable("a")]).set_status("a", "deleted")

    def test_mark_all_read(self):
        feed = NotificationFeed([durable("a"), durable("b", "read"), durable("c")])
        changed = feed.mark_all_read()
        assert [n["id"] for n in changed] == ["a", "c"]
        assert feed.unread_count() == 0
