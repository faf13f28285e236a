"""
services/analytics/trends.py

추이(trend) 집계
- 성적: 학기(term) 문자열별 평균 — 문자열 정렬 순서 (시간순 아님)
- 면허시험 / 설문 / 고용주 평가: 연도별 — 연도 필터와 무관하게 전체 이력 사용
"""

from typing import Iterable, List

from models.board_exams import BoardExamResult
from models.competencies import CompetencyRating
from models.enrollments import Enrollment
from models.surveys import SurveyAnswer, SurveyResponse
from schemas.analytics import BoardExamYearTrend, FeedbackYearTrend, SurveyYearTrend, TermTrend
from services.analytics.scoring import mean, round1, round_percent
from services.analytics.years import extract_year, rating_year, year_of


def grade_trend_by_term(enrollments: Iterable[Enrollment]) -> List[TermTrend]:
    enrollments = list(enrollments)
    trend = []
    for term in sorted({e.term for e in enrollments}):
        grades = [e.grade for e in enrollments if e.term == term]
        trend.append(TermTrend(term=term, avg_grade=round1(mean(grades)), count=len(grades)))
    return trend


def board_exam_trend(board_exams: Iterable[BoardExamResult]) -> List[BoardExamYearTrend]:
    board_exams = list(board_exams)
    years = sorted({y for y in (extract_year(be.exam_date) for be in board_exams) if y})

    trend = []
    for year in years:
        exams = [be for be in board_exams if extract_year(be.exam_date) == year]
        passers = sum(be.passers for be in exams)
        takers = sum(be.takers for be in exams)
        passing_rate = round_percent(passers / takers) if takers > 0 else 0
        trend.append(BoardExamYearTrend(year=year, passers=passers, takers=takers, passing_rate=passing_rate))
    return trend


def survey_trend(
    responses: Iterable[SurveyResponse],
    answers: Iterable[SurveyAnswer],
) -> List[SurveyYearTrend]:
    responses = list(responses)
    answers = list(answers)
    years = sorted({y for y in (year_of(r.submitted_at) for r in responses) if y})

    trend = []
    for year in years:
        response_ids = {r.id for r in responses if year_of(r.submitted_at) == year}
        values = [a.answer_value for a in answers if a.response_id in response_ids and a.answer_value]
        trend.append(SurveyYearTrend(year=year, responses=len(response_ids), avg_rating=round1(mean(values))))
    return trend


def feedback_trend(ratings: Iterable[CompetencyRating]) -> List[FeedbackYearTrend]:
    ratings = list(ratings)
    years = sorted({y for y in (rating_year(r) for r in ratings) if y})

    trend = []
    for year in years:
        # 기수(batch) 또는 평가 시각 중 하나라도 맞으면 해당 연도에 포함
        values = [
            r.rating for r in ratings
            if extract_year(r.batch) == year or year_of(r.created_at) == year
        ]
        trend.append(FeedbackYearTrend(year=year, count=len(values), avg_rating=round1(mean(values))))
    return trend
