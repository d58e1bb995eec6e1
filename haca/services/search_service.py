"""
Candidate Search - rank approved students against a free-text query.

HOW IT WORKS:
1. Lowercase the recruiter's query
2. Score each candidate on what the query mentions:
   - batch code found in query        +10
   - school name found in query       +10
   - each skill name found in query   +5
   - one point per year of experience
3. Drop candidates scoring 0
4. Order by experience, then score

A candidate with experience but no matched terms still scores above 0
and is kept.

Pure functions: no database or network access. Callers pass in approved
students only.
"""

from typing import List, Sequence, Tuple

from haca.models.student import Student

BATCH_WEIGHT = 10
SCHOOL_WEIGHT = 10
SKILL_WEIGHT = 5


def score_candidate(student: Student, query: str) -> int:
    """
    Relevance of one candidate to a query.

    Matching is case-insensitive substring containment.
    """
    lower_query = query.lower()
    score = 0

    if student.batch.value.lower() in lower_query:
        score += BATCH_WEIGHT

    if student.school.value.lower() in lower_query:
        score += SCHOOL_WEIGHT

    matched_skills = [
        skill for skill in student.skills
        if skill.skill_name.lower() in lower_query
    ]
    score += len(matched_skills) * SKILL_WEIGHT

    # Experience bonus (1 point per year)
    score += student.years_of_experience

    return score


def search_students(query: str, candidates: Sequence[Student]) -> List[Student]:
    """
    Filter and order candidates by relevance to `query`.

    A blank query returns every candidate in its original order.
    Ties on both experience and score keep their input order.
    """
    if not query or not query.strip():
        return list(candidates)

    scored: List[Tuple[Student, int]] = [
        (student, score_candidate(student, query)) for student in candidates
    ]
    scored = [item for item in scored if item[1] > 0]

    # First by experience, then by score
    scored.sort(key=lambda item: (item[0].years_of_experience, item[1]), reverse=True)

    return [student for student, _ in scored]
