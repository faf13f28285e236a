def _seed(client):
    program = client.post("/v1/programs/", json={"code": "BSCE", "name": "Civil Engineering", "type": "board"}).json()["data"]
    po = client.post(
        "/v1/outcomes/", json={"program_id": program["id"], "code": "PO1", "description": "Design systems"}
    ).json()["data"]
    course = client.post("/v1/courses/", json={"code": "CE101", "name": "Statics", "program_id": program["id"]}).json()["data"]
    client.post(f"/v1/courses/{course['id']}/outcomes", json={"po_id": po["id"]})
    for grade in (80, 100):
        client.post(
            "/v1/enrollments/",
            json={"user_id": "s1", "course_id": course["id"], "grade": grade, "academic_year": "2023-2024", "term": "Fall 2023"},
        )
    return program, po, course


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert "X-Latency-Ms" in resp.headers


def test_analytics_empty_database(client):
    resp = client.get("/v1/analytics")
    assert resp.status_code == 200
    assert resp.json() == {
        "poAnalytics": [],
        "trendData": [],
        "boardExamTrend": [],
        "surveyTrend": [],
        "feedbackTrend": [],
        "availableYears": [],
        "summary": {
            "totalCourses": 0,
            "totalPOs": 0,
            "totalEnrollments": 0,
            "totalSurveyResponses": 0,
            "totalFeedback": 0,
        },
    }


def test_analytics_grade_only(client):
    program, po, _ = _seed(client)

    body = client.get("/v1/analytics", params={"programId": program["id"]}).json()
    [row] = body["poAnalytics"]
    assert row["po"] == {"id": po["id"], "programId": program["id"], "code": "PO1", "description": "Design systems"}
    assert row["avgGrade"] == 90.0
    assert row["gradeCount"] == 2
    assert row["isBoardProgram"] is True
    assert row["overallScore"] == 4.5
    assert body["trendData"] == [{"term": "Fall 2023", "avgGrade": 90.0, "count": 2}]
    assert body["availableYears"] == ["2023"]


def test_analytics_year_filter_and_board_exam(client):
    program, po, _ = _seed(client)
    for passers in (8, 5):
        resp = client.post(
            "/v1/board-exams/",
            json={"program_id": program["id"], "exam_name": "CELE", "exam_date": "November 2025", "passers": passers, "takers": 10},
        )
        assert resp.json()["success"] is True

    body = client.get("/v1/analytics", params={"year": "2025"}).json()
    [row] = body["poAnalytics"]
    assert row["gradeCount"] == 0
    assert row["boardExamScore"] == 3.3
    assert row["overallScore"] == 3.3
    assert body["boardExamTrend"] == [{"year": "2025", "passers": 13, "takers": 20, "passingRate": 65}]
    assert body["availableYears"] == ["2025", "2023"]
    assert body["summary"]["totalEnrollments"] == 0


def test_analytics_survey_and_feedback(client):
    program, po, _ = _seed(client)
    survey = client.post("/v1/surveys/", json={"title": "Exit survey", "target_role": "graduate"}).json()["data"]
    scale = client.post(
        f"/v1/surveys/{survey['id']}/questions", json={"text": "Rate design skills", "linked_po_id": po["id"]}
    ).json()["data"]
    text = client.post(
        f"/v1/surveys/{survey['id']}/questions", json={"text": "Comments", "type": "text", "linked_po_id": po["id"]}
    ).json()["data"]
    resp = client.post(
        f"/v1/surveys/{survey['id']}/responses",
        json={
            "submitted_at": "2024-03-01T10:00:00",
            "answers": [
                {"question_id": scale["id"], "answer_value": 4},
                {"question_id": text["id"], "answer_text": "Good"},
            ],
        },
    )
    assert resp.json()["success"] is True
    assert len(resp.json()["data"]["answers"]) == 2

    competency = client.post(
        "/v1/competencies/", json={"program_id": program["id"], "name": "Communication"}
    ).json()["data"]
    client.post(f"/v1/competencies/{competency['id']}/outcomes", json={"po_id": po["id"]})
    client.post(f"/v1/competencies/{competency['id']}/ratings", json={"batch": "2024", "rating": 2})

    body = client.get("/v1/analytics").json()
    [row] = body["poAnalytics"]
    assert row["surveyCount"] == 1
    assert row["avgSurvey"] == 4.0
    assert row["feedbackCount"] == 1
    assert row["avgFeedback"] == 2.0
    # (4.5 + 4.0 + 2.0) / 3
    assert row["overallScore"] == 3.5
    assert body["surveyTrend"] == [{"year": "2024", "responses": 1, "avgRating": 4.0}]
    assert body["summary"]["totalFeedback"] == 1


def test_analytics_rejects_non_integer_program_id(client):
    resp = client.get("/v1/analytics", params={"programId": "abc"})
    assert resp.status_code == 422


def test_duplicate_course_code_conflict(client):
    client.post("/v1/courses/", json={"code": "CE101", "name": "Statics"})
    resp = client.post("/v1/courses/", json={"code": "CE101", "name": "Statics again"})
    assert resp.status_code == 409


def test_update_to_duplicate_code_conflict(client):
    client.post("/v1/courses/", json={"code": "CE101", "name": "Statics"})
    other = client.post("/v1/courses/", json={"code": "CE102", "name": "Dynamics"}).json()["data"]
    resp = client.put(f"/v1/courses/{other['id']}", json={"code": "CE101", "name": "Dynamics"})
    assert resp.status_code == 409
    assert client.get(f"/v1/courses/{other['id']}").json()["data"]["code"] == "CE102"

    client.post("/v1/programs/", json={"code": "BSCE", "name": "Civil Engineering"})
    program = client.post("/v1/programs/", json={"code": "BSEE", "name": "Electrical Engineering"}).json()["data"]
    resp = client.put(f"/v1/programs/{program['id']}", json={"code": "BSCE", "name": "Electrical Engineering"})
    assert resp.status_code == 409


def test_missing_rows_use_envelope(client):
    assert client.get("/v1/programs/999").json() == {
        "success": False,
        "error": {"code": 404, "message": "Program not found"},
    }
    assert client.delete("/v1/enrollments/999").json()["success"] is False


def test_enrollment_grade_range_is_validated(client):
    resp = client.post(
        "/v1/enrollments/",
        json={"user_id": "s1", "course_id": 1, "grade": 120, "academic_year": "2024-2025", "term": "Fall 2024"},
    )
    assert resp.status_code == 422


def test_survey_response_rejects_foreign_question(client):
    survey = client.post("/v1/surveys/", json={"title": "S", "target_role": "student"}).json()["data"]
    resp = client.post(f"/v1/surveys/{survey['id']}/responses", json={"answers": [{"question_id": 42, "answer_value": 3}]})
    assert resp.json()["success"] is False


def test_delete_outcome_removes_mappings(client):
    _, po, course = _seed(client)
    assert client.delete(f"/v1/outcomes/{po['id']}").json()["success"] is True
    assert client.get(f"/v1/courses/{course['id']}/outcomes").json()["data"] == []


def test_competency_update_replaces_outcome_mappings(client):
    program, po1, _ = _seed(client)
    po2 = client.post(
        "/v1/outcomes/", json={"program_id": program["id"], "code": "PO2", "description": "Communicate"}
    ).json()["data"]
    created = client.post(
        "/v1/competencies/", json={"program_id": program["id"], "name": "Design", "po_ids": [po1["id"]]}
    ).json()["data"]
    assert created["po_ids"] == [po1["id"]]

    body = client.put(
        f"/v1/competencies/{created['id']}",
        json={"program_id": program["id"], "name": "Design and teamwork", "po_ids": [po2["id"], po2["id"]]},
    ).json()
    assert body["success"] is True
    assert body["data"]["name"] == "Design and teamwork"
    assert body["data"]["po_ids"] == [po2["id"]]

    # po_ids 생략 시 매핑 유지
    client.put(f"/v1/competencies/{created['id']}", json={"program_id": program["id"], "name": "Design"})
    assert client.get(f"/v1/competencies/{created['id']}").json()["data"]["po_ids"] == [po2["id"]]

    resp = client.put(
        f"/v1/competencies/{created['id']}", json={"program_id": program["id"], "name": "Design", "po_ids": [999]}
    ).json()
    assert resp["success"] is False
    assert client.get("/v1/competencies/999").json()["error"]["code"] == 404


def test_program_ratings_are_scoped_and_newest_first(client):
    program, _, _ = _seed(client)
    other = client.post("/v1/programs/", json={"code": "BSEE", "name": "Electrical Engineering"}).json()["data"]
    mine = client.post("/v1/competencies/", json={"program_id": program["id"], "name": "Design"}).json()["data"]
    theirs = client.post("/v1/competencies/", json={"program_id": other["id"], "name": "Circuits"}).json()["data"]
    first = client.post(f"/v1/competencies/{mine['id']}/ratings", json={"rating": 3}).json()["data"]
    second = client.post(f"/v1/competencies/{mine['id']}/ratings", json={"rating": 5}).json()["data"]
    client.post(f"/v1/competencies/{theirs['id']}/ratings", json={"rating": 1})

    body = client.get("/v1/competencies/ratings", params={"program_id": program["id"]}).json()
    assert [r["id"] for r in body["data"]] == [second["id"], first["id"]]
    assert len(client.get("/v1/competencies/ratings").json()["data"]) == 3


def test_survey_update_replaces_questions_and_course_links(client):
    _, po, course = _seed(client)
    survey = client.post(
        "/v1/surveys/",
        json={
            "title": "Exit survey",
            "target_role": "graduate",
            "questions": [{"text": "Rate design skills", "linked_po_id": po["id"]}],
            "course_ids": [course["id"]],
        },
    ).json()["data"]
    assert len(survey["questions"]) == 1
    assert survey["course_ids"] == [course["id"]]
    old_question = survey["questions"][0]
    client.post(
        f"/v1/surveys/{survey['id']}/responses", json={"answers": [{"question_id": old_question["id"], "answer_value": 4}]}
    )

    body = client.put(
        f"/v1/surveys/{survey['id']}",
        json={
            "title": "Exit survey v2",
            "target_role": "graduate",
            "questions": [{"text": "Rate teamwork"}, {"text": "Comments", "type": "text"}],
            "course_ids": [],
        },
    ).json()
    assert body["success"] is True
    assert body["data"]["title"] == "Exit survey v2"
    assert [q["text"] for q in body["data"]["questions"]] == ["Rate teamwork", "Comments"]
    assert body["data"]["course_ids"] == []
    assert len(client.get(f"/v1/surveys/{survey['id']}/responses").json()["data"]) == 1

    # 교체된 문항에 걸린 답변은 더 이상 PO 에 반영되지 않음
    [row] = client.get("/v1/analytics").json()["poAnalytics"]
    assert row["surveyCount"] == 0

    missing = client.put(
        f"/v1/surveys/{survey['id']}", json={"title": "X", "target_role": "graduate", "course_ids": [999]}
    ).json()
    assert missing["success"] is False


def test_course_outcomes_replace(client):
    program, po1, course = _seed(client)
    po2 = client.post(
        "/v1/outcomes/", json={"program_id": program["id"], "code": "PO2", "description": "Communicate"}
    ).json()["data"]

    body = client.put(f"/v1/courses/{course['id']}/outcomes", json={"po_ids": [po2["id"]]}).json()
    assert body["success"] is True
    links = client.get(f"/v1/courses/{course['id']}/outcomes").json()["data"]
    assert [link["po_id"] for link in links] == [po2["id"]]

    rows = {r["po"]["code"]: r for r in client.get("/v1/analytics").json()["poAnalytics"]}
    assert rows["PO1"]["gradeCount"] == 0
    assert rows["PO2"]["gradeCount"] == 2

    assert client.put(f"/v1/courses/{course['id']}/outcomes", json={"po_ids": [999]}).json()["success"] is False
    assert [link["po_id"] for link in client.get(f"/v1/courses/{course['id']}/outcomes").json()["data"]] == [po2["id"]]
