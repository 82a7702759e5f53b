"""Tests for schedule management."""
from tests.conftest import as_user, create_test_schedule, create_test_user


class TestScheduleCRUD:

    def test_create_schedule_starts_with_status_none(self, client):
        pastor = create_test_user(client, name="Pastor Mark", role="pastor")
        schedule = create_test_schedule(client, pastor, user_id=pastor["id"])
        assert schedule["status"] == "none"
        assert schedule["title"] == "Sunday Fellowship"
        assert schedule["user_id"] == pastor["id"]
        assert schedule["assigned_pastor"] is None

    def test_create_requires_title(self, client):
        pastor = create_test_user(client, name="Pastor Mark", role="pastor")
        resp = client.post("/api/schedules/", json={
            "title": "   ",
            "start_time": "2026-11-01T01:00:00+00:00",
            "end_time": "2026-11-01T03:00:00+00:00",
        }, headers=as_user(pastor))
        assert resp.status_code == 400

    def test_create_missing_times(self, client):
        pastor = create_test_user(client, name="Pastor Mark", role="pastor")
        resp = client.post("/api/schedules/", json={"title": "No times"}, headers=as_user(pastor))
        assert resp.status_code == 422

    def test_end_before_start(self, client):
        pastor = create_test_user(client, name="Pastor Mark", role="pastor")
        resp = client.post("/api/schedules/", json={
            "title": "Backwards",
            "start_time": "2026-11-01T03:00:00+00:00",
            "end_time": "2026-11-01T01:00:00+00:00",
        }, headers=as_user(pastor))
        assert resp.status_code == 400

    def test_update_schedule_keeps_status(self, client, store, db):
        from churchbook.models.collections import Collection
        pastor = create_test_user(client, name="Pastor Mark", role="pastor")
        schedule = create_test_schedule(client, pastor)
        store.update(Collection.schedules, schedule["id"], {"status": "pending"})
        store.commit()

        resp = client.put(f"/api/schedules/{schedule['id']}", json={
            "title": "Evening Fellowship",
            "location": "Chapel",
        }, headers=as_user(pastor))
        assert resp.status_code == 200
        data = resp.json()
        assert data["title"] == "Evening Fellowship"
        assert data["location"] == "Chapel"
        assert data["description"] == "Weekly fellowship"
        assert data["status"] == "pending"

    def test_update_not_found(self, client):
        admin = create_test_user(client, name="Admin", role="admin")
        resp = client.put("/api/schedules/missing", json={"title": "X"}, headers=as_user(admin))
        assert resp.status_code == 404

    def test_delete_schedule(self, client):
        admin = create_test_user(client, name="Admin", role="admin")
        schedule = create_test_schedule(client, admin)
        resp = client.delete(f"/api/schedules/{schedule['id']}", headers=as_user(admin))
        assert resp.status_code == 204
        assert client.get(f"/api/schedules/{schedule['id']}").status_code == 404

    def test_list_with_status_filter(self, client):
        pastor = create_test_user(client, name="Pastor Mark", role="pastor")
        create_test_schedule(client, pastor, title="A")
        create_test_schedule(client, pastor, title="B")
        assert len(client.get("/api/schedules/").json()) == 2
        assert client.get("/api/schedules/?status=none").status_code == 200
        assert len(client.get("/api/schedules/?status=none").json()) == 2
        assert client.get("/api/schedules/?status=pending").json() == []
        assert client.get("/api/schedules/?status=booked").status_code == 400


class TestScheduleAuthorization:

    def test_member_cannot_create(self, client):
        member = create_test_user(client, name="Maria", role="member")
        resp = client.post("/api/schedules/", json={
            "title": "Mine",
            "start_time": "2026-11-01T01:00:00+00:00",
            "end_time": "2026-11-01T03:00:00+00:00",
        }, headers=as_user(member))
        assert resp.status_code == 403

    def test_missing_actor(self, client):
        resp = client.post("/api/schedules/", json={
            "title": "Anonymous",
            "start_time": "2026-11-01T01:00:00+00:00",
            "end_time": "2026-11-01T03:00:00+00:00",
        })
        assert resp.status_code == 401

    def test_unknown_actor(self, client):
        resp = client.delete("/api/schedules/anything", headers={"X-User-Id": "ghost"})
        assert resp.status_code == 401


class TestApprovedBoard:

    def test_approved_sorted_latest_first(self, client, store):
        from churchbook.models.collections import Collection
        pastor = create_test_user(client, name="Pastor Mark", role="pastor")
        early = create_test_schedule(client, pastor, title="Early",
                                     start_time="2026-11-01T01:00:00+00:00",
                                     end_time="2026-11-01T02:00:00+00:00")
        late = create_test_schedule(client, pastor, title="Late",
                                    start_time="2026-12-01T01:00:00+00:00",
                                    end_time="2026-12-01T02:00:00+00:00")
        create_test_schedule(client, pastor, title="Unbooked")
        for s in (early, late):
            store.update(Collection.schedules, s["id"], {"status": "approved"})
        store.commit()

        resp = client.get("/api/schedules/approved")
        assert resp.status_code == 200
        assert [s["title"] for s in resp.json()] == ["Late", "Early"]

    def test_board_and_status_filter_agree(self, client, store):
        from churchbook.models.collections import Collection
        pastor = create_test_user(client, name="Pastor Mark", role="pastor")
        canonical = create_test_schedule(client, pastor, title="Canonical")
        odd = create_test_schedule(client, pastor, title="Odd casing")
        store.update(Collection.schedules, canonical["id"], {"status": "approved"})
        store.update(Collection.schedules, odd["id"], {"status": "Approved"})
        store.commit()

        board = {s["id"] for s in client.get("/api/schedules/approved").json()}
        filtered = {s["id"] for s in client.get("/api/schedules/?status=APPROVED").json()}
        assert board == filtered == {canonical["id"]}
