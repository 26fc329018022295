"""
Tests for /api/submissions
"""
import json


def _submit(client, **body):
    return client.post("/api/submissions", json=body)


class TestCreateSubmission:

    def test_create_returns_record(self, client, kv, create_assignment):
        assignment = create_assignment()

        response = _submit(
            client,
            assignmentId=assignment["id"],
            studentName=" Ana ",
            response=" 5/6 ",
            classPin=" 42 ",
            steps=" common denominator ",
            reflection=" easy ",
        )

        assert response.status_code == 201
        data = response.json()
        item = data["item"]
        assert data["ok"] is True
        assert item["id"] == data["id"]
        assert item["assignmentId"] == assignment["id"]
        assert item["studentName"] == "Ana"
        assert item["response"] == "5/6"
        assert item["classPin"] == "42"
        assert item["steps"] == "common denominator"
        assert item["reflection"] == "easy"
        assert item["submittedAt"].endswith("Z")
        assert json.loads(kv._data[f"submission:{data['id']}"]) == item
        assert json.loads(kv._data["index:submissions"]) == [data["id"]]

    def test_optional_fields_default(self, client, create_assignment):
        assignment = create_assignment()
        item = _submit(client, assignmentId=assignment["id"], studentName="Ana", response="5/6").json()["item"]

        assert item["classPin"] == ""
        assert item["steps"] == ""
        assert item["reflection"] == ""

    def test_caller_submitted_at_kept(self, client, create_assignment):
        assignment = create_assignment()
        item = _submit(
            client,
            assignmentId=assignment["id"],
            studentName="Ana",
            response="5/6",
            submittedAt="2025-09-02T10:00:00Z",
        ).json()["item"]

        assert item["submittedAt"] == "2025-09-02T10:00:00Z"

    def test_missing_assignment_id(self, client):
        response = _submit(client, studentName="Ana", response="5/6")
        assert response.status_code == 400
        assert response.json() == {"ok": False, "error": "assignmentId is required"}

    def test_blank_student_name(self, client, create_assignment):
        assignment = create_assignment()
        response = _submit(client, assignmentId=assignment["id"], studentName="  ", response="5/6")
        assert response.status_code == 400
        assert response.json()["error"] == "studentName is required"

    def test_blank_response(self, client, create_assignment):
        assignment = create_assignment()
        response = _submit(client, assignmentId=assignment["id"], studentName="Ana", response="")
        assert response.status_code == 400
        assert response.json()["error"] == "response is required"

    def test_field_errors_come_before_lookup(self, client):
        response = _submit(client, assignmentId="missing", studentName="Ana")
        assert response.status_code == 400
        assert response.json()["error"] == "response is required"

    def test_unknown_assignment_is_404_and_writes_nothing(self, client, kv, create_assignment):
        create_assignment()
        before = dict(kv._data)

        response = _submit(client, assignmentId="does-not-exist", studentName="Ana", response="5/6")

        assert response.status_code == 404
        assert response.json() == {"ok": False, "error": "assignment not found"}
        assert kv._data == before
        assert "index:submissions" not in kv._data

    def test_assignment_id_not_trimmed(self, client, create_assignment):
        assignment = create_assignment()
        response = _submit(client, assignmentId=f" {assignment['id']} ", studentName="Ana", response="5/6")
        assert response.status_code == 404

    def test_malformed_json(self, client, kv):
        response = client.post(
            "/api/submissions",
            content=b"studentName=Ana",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"ok": False, "error": "Invalid JSON body"}
        assert kv.keys() == []


class TestListSubmissions:

    def test_empty(self, client):
        assert client.get("/api/submissions").json() == {"ok": True, "items": []}

    def test_newest_first(self, client, create_assignment):
        assignment = create_assignment()
        ids = [
            _submit(client, assignmentId=assignment["id"], studentName=name, response="r").json()["id"]
            for name in ("Ana", "Ben", "Cy")
        ]

        items = client.get("/api/submissions").json()["items"]

        assert [item["id"] for item in items] == list(reversed(ids))

    def test_filter_by_assignment(self, client, create_assignment):
        x = create_assignment(title="X")
        y = create_assignment(title="Y")
        s1 = _submit(client, assignmentId=x["id"], studentName="Ana", response="1").json()["item"]
        _submit(client, assignmentId=y["id"], studentName="Ben", response="2")

        response = client.get("/api/submissions", params={"assignmentId": x["id"]})

        assert response.status_code == 200
        assert response.json() == {"ok": True, "items": [s1]}

    def test_filter_is_exact_match(self, client, create_assignment):
        x = create_assignment()
        _submit(client, assignmentId=x["id"], studentName="Ana", response="1")

        items = client.get("/api/submissions", params={"assignmentId": x["id"][:-1]}).json()["items"]

        assert items == []

    def test_empty_filter_returns_all(self, client, create_assignment):
        x = create_assignment()
        _submit(client, assignmentId=x["id"], studentName="Ana", response="1")

        assert len(client.get("/api/submissions?assignmentId=").json()["items"]) == 1

    def test_filter_keeps_newest_first(self, client, create_assignment):
        x = create_assignment()
        y = create_assignment()
        first = _submit(client, assignmentId=x["id"], studentName="Ana", response="1").json()["id"]
        _submit(client, assignmentId=y["id"], studentName="Ben", response="2")
        third = _submit(client, assignmentId=x["id"], studentName="Cy", response="3").json()["id"]

        items = client.get("/api/submissions", params={"assignmentId": x["id"]}).json()["items"]

        assert [item["id"] for item in items] == [third, first]


class TestEndToEnd:

    def test_assignment_submission_roundtrip(self, client):
        created = client.post("/api/assignments", json={"title": "Fractions", "prompt": "Explain 1/2+1/3"})
        assert created.status_code == 201
        assignment_id = created.json()["id"]

        submitted = client.post("/api/submissions", json={
            "assignmentId": assignment_id,
            "studentName": "Ana",
            "response": "5/6",
        })
        assert submitted.status_code == 201

        listed = client.get(f"/api/submissions?assignmentId={assignment_id}")
        data = listed.json()
        assert data["ok"] is True
        assert len(data["items"]) == 1
        assert data["items"][0]["studentName"] == "Ana"
        assert data["items"][0]["assignmentId"] == assignment_id
