from src.attendance_tracker.attendance_tracker.core.exceptions import TransportError


def _flashes(client):
    with client.session_transaction() as sess:
        return list(sess.get("_flashes", []))


def test_add_student_then_roster_reloads(client, students_repo):
    client.get("/attendance")

    resp = client.post("/students", data={"name": "Dana"})

    assert resp.status_code == 302
    assert ("success", 'Student "Dana" added successfully! ID: 100') in _flashes(client)
    html = client.get("/attendance").get_data(as_text=True)
    assert 'data-student-id="100"' in html


def test_add_student_keeps_unsaved_edits(client, students_repo):
    client.get("/attendance")
    client.post("/attendance/status", data={"student_id": "3", "status": "PRESENT"})

    client.post("/students", data={"name": "Dana"})

    assert _flashes(client)[-1][0] == "info"
    html = client.get("/attendance").get_data(as_text=True)
    assert 'data-student-id="100"' not in html
    assert "Unsaved changes" in html


def test_blank_name_is_a_warning(client, students_repo):
    client.post("/students", data={"name": " "})

    assert _flashes(client) == [("warning", "Please enter a student name")]
    assert students_repo.added == []


def test_backend_unreachable_is_an_error(client, students_repo):
    students_repo.error = TransportError("Could not reach the attendance server. Please try again.")

    client.post("/students", data={"name": "Dana"})

    assert _flashes(client) == [("danger", "Could not reach the attendance server. Please try again.")]
