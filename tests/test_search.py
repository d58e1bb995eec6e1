from datetime import datetime

from haca.models.student import Skill, Student
from haca.schemas.schemas import ApprovalStatus
from haca.services.search_service import score_candidate, search_students


def make_student(student_id, batch="C4", school="Coding", skills=(), years=0):
    return Student(
        student_id=student_id,
        user_id=student_id,
        name=f"Student {student_id}",
        batch=batch,
        school=school,
        skills=[Skill(skill_id=i, skill_name=name) for i, name in enumerate(skills, 1)],
        years_of_experience=years,
        linkedin_url=f"https://linkedin.com/in/s{student_id}",
        status=ApprovalStatus.approved,
        created_at=datetime(2024, 1, 1),
    )


CANDIDATES = [
    make_student(1, "C4", "Coding", ["React", "AWS"], 3),
    make_student(2, "M1", "Marketing", ["SEO"], 0),
    make_student(3, "D2", "Design", ["Figma"], 5),
]


def test_blank_query_returns_candidates_unchanged():
    for query in ["", "   ", "\t\n"]:
        assert search_students(query, CANDIDATES) == CANDIDATES


def test_scoring_scenario():
    student = CANDIDATES[0]
    # batch 10 + school 10 + React 5 + 3 years
    assert score_candidate(student, "C4 coding student with React experience") == 28


def test_matching_is_case_insensitive():
    student = make_student(9, "C2", "Coding", ["AWS"], 0)
    assert score_candidate(student, "c2 CODING aws") == 25


def test_zero_score_candidates_are_excluded():
    results = search_students("Marketing student with SEO skills", CANDIDATES)
    ids = [s.student_id for s in results]
    # Marketing student matches; the others only get experience points
    assert 2 in ids

    fresh = make_student(4, "C1", "Coding", ["Go"], 0)
    assert score_candidate(fresh, "figma") == 0
    assert fresh not in search_students("figma", [fresh])


def test_experience_alone_keeps_candidate():
    veteran = make_student(5, "C1", "Coding", ["Go"], 2)
    assert search_students("figma", [veteran]) == [veteran]


def test_sorted_by_experience_then_score():
    junior = make_student(10, "C4", "Coding", ["React", "AWS"], 1)
    senior = make_student(11, "C4", "Coding", ["React"], 4)
    same_years_more_skills = make_student(12, "C4", "Coding", ["React", "AWS"], 4)

    results = search_students("C4 React AWS", [junior, senior, same_years_more_skills])

    assert [s.student_id for s in results] == [12, 11, 10]


def test_more_experience_ranks_first_with_same_terms():
    three_years = make_student(20, "C4", "Coding", ["React", "AWS"], 3)
    one_year = make_student(21, "C4", "Coding", ["React", "AWS"], 1)

    results = search_students("C4 coding student with React experience", [one_year, three_years])

    assert results == [three_years, one_year]


def test_exact_ties_keep_input_order():
    a = make_student(30, "C3", "Coding", ["Python"], 2)
    b = make_student(31, "C3", "Coding", ["Python"], 2)

    assert search_students("python", [a, b]) == [a, b]
    assert search_students("python", [b, a]) == [b, a]


def test_does_not_mutate_input():
    candidates = list(CANDIDATES)
    search_students("design figma", candidates)
    assert candidates == CANDIDATES
