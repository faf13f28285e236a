"""
services/analytics/years.py

- 제각각인 날짜 문자열에서 연도 추출 ("2024-2025", "October 2025", ISO 타임스탬프 ...)
- 연도 필터 적용 (성적/면허시험/고용주 평가/설문 응답 → 답변까지 연쇄 필터)
- 연도 선택 드롭다운용 전체 연도 목록 수집
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Set

from models.board_exams import BoardExamResult
from models.competencies import CompetencyRating
from models.enrollments import Enrollment
from models.surveys import SurveyAnswer, SurveyResponse

_YEAR_RE = re.compile(r"[0-9]{4}")

ALL_YEARS = "all"


def extract_year(value: Optional[str]) -> Optional[str]:
    """문자열에서 처음 나오는 4자리 숫자를 연도로 반환. 없으면 None."""
    if not value:
        return None
    match = _YEAR_RE.search(value)
    return match.group(0) if match else None


def year_of(value) -> Optional[str]:
    """datetime/date 는 달력 연도, 문자열은 extract_year 결과"""
    if value is None:
        return None
    if isinstance(value, date):  # datetime 포함
        return str(value.year)
    return extract_year(str(value))


def rating_year(rating: CompetencyRating) -> Optional[str]:
    # batch 가 있으면 batch 기준 (연도가 없어도 created_at 으로 넘어가지 않음)
    if rating.batch:
        return extract_year(rating.batch)
    return year_of(rating.created_at)


def is_year_selected(year: Optional[str]) -> bool:
    return bool(year) and year != ALL_YEARS


# ==========================================================
# [필터] 연도별 데이터 축소
# ==========================================================

@dataclass(frozen=True)
class YearFiltered:
    enrollments: List[Enrollment]
    board_exams: List[BoardExamResult]
    competency_ratings: List[CompetencyRating]
    survey_responses: List[SurveyResponse]
    survey_answers: List[SurveyAnswer]


def filter_by_year(
    year: Optional[str],
    *,
    enrollments: Iterable[Enrollment],
    board_exams: Iterable[BoardExamResult],
    competency_ratings: Iterable[CompetencyRating],
    survey_responses: Iterable[SurveyResponse],
    survey_answers: Iterable[SurveyAnswer],
) -> YearFiltered:
    enrollments = list(enrollments)
    board_exams = list(board_exams)
    competency_ratings = list(competency_ratings)
    survey_responses = list(survey_responses)

    if is_year_selected(year):
        # 학기 또는 학년도 중 하나만 맞아도 포함
        enrollments = [
            e for e in enrollments
            if extract_year(e.term) == year or extract_year(e.academic_year) == year
        ]
        board_exams = [be for be in board_exams if extract_year(be.exam_date) == year]
        competency_ratings = [
            r for r in competency_ratings
            if extract_year(r.batch) == year or year_of(r.created_at) == year
        ]
        survey_responses = [r for r in survey_responses if year_of(r.submitted_at) == year]

    # 답변에는 날짜가 없으므로 남은 응답 ID 기준으로 연쇄 필터
    response_ids = {r.id for r in survey_responses}
    answers = [a for a in survey_answers if a.response_id in response_ids]

    return YearFiltered(
        enrollments=enrollments,
        board_exams=board_exams,
        competency_ratings=competency_ratings,
        survey_responses=survey_responses,
        survey_answers=answers,
    )


# ==========================================================
# [연도 목록] 필터와 무관하게 전체 이력에서 수집
# ==========================================================

def collect_available_years(
    *,
    enrollments: Iterable[Enrollment],
    board_exams: Iterable[BoardExamResult],
    competency_ratings: Iterable[CompetencyRating],
    survey_responses: Iterable[SurveyResponse],
) -> List[str]:
    years: Set[Optional[str]] = set()
    years.update(extract_year(e.term) for e in enrollments)
    years.update(extract_year(be.exam_date) for be in board_exams)
    years.update(rating_year(r) for r in competency_ratings)
    years.update(year_of(r.submitted_at) for r in survey_responses)
    years.discard(None)

    # 최신 연도가 먼저 오도록 내림차순
    return sorted(years, reverse=True)
