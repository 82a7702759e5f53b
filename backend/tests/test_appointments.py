"""Tests for the appointment approval workflow."""
from churchbook.models.collections import Collection
from tests.conftest import as_user, create_test_schedule, create_test_user


def _setup(client):
    pastor = create_test_user(client, name="Pastor Mark", role="pastor")
    member = create_test_user(client, name="Maria Santos", role="member")
    schedule = create_test_schedule(client, pastor, title="Counseling")
    return pastor, member, schedule


def _request(client, member, pastor, schedule_id, notes="Family counseling"):
    resp = client.post("/api/appointments/", json={
        "schedule_id": schedule_id,
        "pastor_id": pastor["id"],
        "notes": notes,
    }, headers=as_user(member))
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestCreateAppointment:

    def test_create_is_pending(self, client):
        pastor, member, schedule = _setup(client)
        appt = _request(client, member, pastor, schedule["id"])
        assert appt["status"] == "pending"
        assert appt["member_id"] == member["id"]
        assert appt["pastor_id"] == pastor["id"]
        assert appt["created_at"] is not None

    def test_pastor_cannot_request(self, client):
        pastor, _, schedule = _setup(client)
        resp = client.post("/api/appointments/", json={
            "schedule_id": schedule["id"], "pastor_id": pastor["id"],
        }, headers=as_user(pastor))
        assert resp.status_code == 403

    def test_blank_references_rejected(self, client):
        pastor, member, _ = _setup(client)
        resp = client.post("/api/appointments/", json={
            "schedule_id": " ", "pastor_id": pastor["id"],
        }, headers=as_user(member))
        assert resp.status_code == 400


class TestPendingAppointments:

    def test_pending_list_is_denormalized(self, client):
        pastor, member, schedule = _setup(client)
        appt = _request(client, member, pastor, schedule["id"])

        resp = client.get("/api/appointments/pending", headers=as_user(pastor))
        assert resp.status_code == 200
        rows = resp.json()
        assert len(rows) == 1
        row = rows[0]
        assert row["id"] == appt["id"]
        assert row["member_name"] == "Maria Santos"
        assert row["pastor_name"] == "Pastor Mark"
        assert row["schedule_title"] == "Counseling"
        assert row["location"] == "Main Hall"
        # 01:00Z on Nov 1 is Nov 1 in Asia/Manila
        assert row["schedule_info"] == "Nov 01, 2026 to Nov 01, 2026"

    def test_full_name_preferred(self, client, store):
        pastor, member, schedule = _setup(client)
        store.update(Collection.users, member["id"], {"fullName": "Maria Clara Santos"})
        store.commit()
        _request(client, member, pastor, schedule["id"])
        row = client.get("/api/appointments/pending", headers=as_user(pastor)).json()[0]
        assert row["member_name"] == "Maria Clara Santos"

    def test_missing_schedule_silently_dropped(self, client, store):
        """A1 pending but its schedule document is gone → not listed, no error."""
        pastor, member, schedule = _setup(client)
        kept = _request(client, member, pastor, schedule["id"])
        store.create(Collection.appointments, {
            "schedule_id": "no-such-schedule",
            "member_id": member["id"],
            "pastor_id": pastor["id"],
            "status": "pending",
        })
        store.commit()

        resp = client.get("/api/appointments/pending", headers=as_user(pastor))
        assert resp.status_code == 200
        assert [r["id"] for r in resp.json()] == [kept["id"]]

    def test_missing_member_or_pastor_dropped(self, client, store):
        pastor, member, schedule = _setup(client)
        for member_id, pastor_id in (("ghost", pastor["id"]), (member["id"], "ghost"), (None, pastor["id"])):
            store.create(Collection.appointments, {
                "schedule_id": schedule["id"],
                "member_id": member_id,
                "pastor_id": pastor_id,
                "status": "pending",
            })
        store.commit()
        assert client.get("/api/appointments/pending", headers=as_user(pastor)).json() == []

    def test_non_pending_excluded(self, client):
        pastor, member, schedule = _setup(client)
        appt = _request(client, member, pastor, schedule["id"])
        client.post(f"/api/appointments/{appt['id']}/approve", headers=as_user(pastor))
        assert client.get("/api/appointments/pending", headers=as_user(pastor)).json() == []


class TestApproveRejectAppointment:

    def test_approve_only_changes_status(self, client, store, db):
        pastor, member, schedule = _setup(client)
        appt = _request(client, member, pastor, schedule["id"])
        before = store.get(Collection.appointments, appt["id"])

        resp = client.post(f"/api/appointments/{appt['id']}/approve", headers=as_user(pastor))
        assert resp.status_code == 200
        assert resp.json()["status"] == "Approved"

        db.expire_all()
        after = store.get(Collection.appointments, appt["id"])
        assert after == {**before, "status": "Approved"}

    def test_approve_leaves_schedule_alone(self, client):
        pastor, member, schedule = _setup(client)
        appt = _request(client, member, pastor, schedule["id"])
        client.post(f"/api/appointments/{appt['id']}/approve", headers=as_user(pastor))
        assert client.get(f"/api/schedules/{schedule['id']}").json()["status"] == "none"

    def test_reject_only_changes_status(self, client, store, db):
        pastor, member, schedule = _setup(client)
        appt = _request(client, member, pastor, schedule["id"])
        before = store.get(Collection.appointments, appt["id"])

        resp = client.post(f"/api/appointments/{appt['id']}/reject", headers=as_user(pastor))
        assert resp.status_code == 200
        assert resp.json()["status"] == "Rejected"

        db.expire_all()
        assert store.get(Collection.appointments, appt["id"]) == {**before, "status": "Rejected"}

    def test_decided_appointment_conflicts(self, client):
        pastor, member, schedule = _setup(client)
        appt = _request(client, member, pastor, schedule["id"])
        client.post(f"/api/appointments/{appt['id']}/reject", headers=as_user(pastor))
        resp = client.post(f"/api/appointments/{appt['id']}/approve", headers=as_user(pastor))
        assert resp.status_code == 409

    def test_unknown_appointment(self, client):
        pastor, _, _ = _setup(client)
        assert client.post("/api/appointments/missing/approve", headers=as_user(pastor)).status_code == 404

    def test_member_cannot_approve(self, client):
        pastor, member, schedule = _setup(client)
        appt = _request(client, member, pastor, schedule["id"])
        assert client.post(f"/api/appointments/{appt['id']}/approve", headers=as_user(member)).status_code == 403


class TestApprovedAppointments:

    def test_approved_list_keeps_unresolved_rows(self, client, store):
        pastor, member, schedule = _setup(client)
        appt = _request(client, member, pastor, schedule["id"])
        client.post(f"/api/appointments/{appt['id']}/approve", headers=as_user(pastor))
        orphan = store.create(Collection.appointments, {
            "schedule_id": "gone", "member_id": member["id"], "pastor_id": pastor["id"], "status": "Approved",
        })
        store.commit()

        rows = {r["id"]: r for r in client.get("/api/appointments/approved", headers=as_user(pastor)).json()}
        assert set(rows) == {appt["id"], orphan["id"]}
        assert rows[appt["id"]]["schedule_title"] == "Counseling"
        assert rows[orphan["id"]]["schedule_title"] is None
        assert rows[orphan["id"]]["member_name"] == "Maria Santos"
