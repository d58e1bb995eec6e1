def approve(client, admin_headers, student):
    response = client.put(f"/api/admin/students/{student['student_id']}/approve", headers=admin_headers)
    assert response.status_code == 200


def test_only_approved_students_are_listed(client, register, admin_headers):
    visible = register()
    register(email="ravi@example.com", name="Ravi")
    rejected = register(email="mira@example.com", name="Mira")
    approve(client, admin_headers, visible)
    client.put(f"/api/admin/students/{rejected['student_id']}/reject", headers=admin_headers)

    response = client.get("/api/students")

    assert response.status_code == 200
    assert [s["student_id"] for s in response.json()] == [visible["student_id"]]


def test_search_never_returns_unapproved(client, register, admin_headers):
    register(skills="React")

    assert client.get("/api/students/search", params={"q": "C4 coding React"}).json() == []
    assert client.get("/api/students/search", params={"q": ""}).json() == []


def test_search_ranks_approved_students(client, register, admin_headers):
    junior = register(years_of_experience=1)
    senior = register(email="ravi@example.com", name="Ravi", years_of_experience=3)
    fresh_designer = register(
        email="mira@example.com", name="Mira", batch="D1", school="Design",
        skills="Figma", years_of_experience=0
    )
    for student in (junior, senior, fresh_designer):
        approve(client, admin_headers, student)

    response = client.get("/api/students/search", params={"q": "C4 coding student with React experience"})

    assert response.status_code == 200
    assert [s["student_id"] for s in response.json()] == [senior["student_id"], junior["student_id"]]


def test_blank_search_shows_all_approved(client, register, admin_headers):
    first = register()
    second = register(email="ravi@example.com", name="Ravi")
    approve(client, admin_headers, first)
    approve(client, admin_headers, second)

    listed = client.get("/api/students").json()
    searched = client.get("/api/students/search", params={"q": "   "}).json()

    assert searched == listed
    assert len(searched) == 2


def test_skill_catalog(client, register):
    register(skills="React, AWS")
    register(email="ravi@example.com", skills="Docker, React")

    assert client.get("/api/skills").json() == ["AWS", "Docker", "React"]
