"""
services/analytics/engine.py

PO Analytics 집계 진입점.
- build_analytics: 스냅샷 → 응답 (순수 함수, DB 접근 없음)
- get_analytics: DB 세션에서 스냅샷을 읽어 build_analytics 호출
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from schemas.analytics import AnalyticsResponse, AnalyticsSummary
from services.analytics.scoring import compute_po_score
from services.analytics.snapshot import AnalyticsSnapshot, load_snapshot
from services.analytics.trends import board_exam_trend, feedback_trend, grade_trend_by_term, survey_trend
from services.analytics.years import collect_available_years, filter_by_year

logger = logging.getLogger(__name__)


def build_analytics(
    snapshot: AnalyticsSnapshot,
    program_id: Optional[int] = None,
    year: Optional[str] = None,
) -> AnalyticsResponse:
    outcomes = snapshot.outcomes
    # 0 / None 은 전체 과정
    if program_id:
        outcomes = [po for po in outcomes if po.program_id == program_id]

    filtered = filter_by_year(
        year,
        enrollments=snapshot.enrollments,
        board_exams=snapshot.board_exams,
        competency_ratings=snapshot.competency_ratings,
        survey_responses=snapshot.responses,
        survey_answers=snapshot.answers,
    )

    available_years = collect_available_years(
        enrollments=snapshot.enrollments,
        board_exams=snapshot.board_exams,
        competency_ratings=snapshot.competency_ratings,
        survey_responses=snapshot.responses,
    )

    po_analytics = [
        compute_po_score(
            po,
            course_mappings=snapshot.course_mappings,
            enrollments=filtered.enrollments,
            questions=snapshot.questions,
            answers=filtered.survey_answers,
            competency_mappings=snapshot.competency_mappings,
            ratings=filtered.competency_ratings,
            program=snapshot.program(po.program_id),
            board_exams=filtered.board_exams,
        )
        for po in outcomes
    ]

    return AnalyticsResponse(
        po_analytics=po_analytics,
        # 학기별 성적 추이만 연도 필터 결과를 사용, 나머지는 전체 이력
        trend_data=grade_trend_by_term(filtered.enrollments),
        board_exam_trend=board_exam_trend(snapshot.board_exams),
        survey_trend=survey_trend(snapshot.responses, snapshot.answers),
        feedback_trend=feedback_trend(snapshot.competency_ratings),
        available_years=available_years,
        summary=AnalyticsSummary(
            total_courses=len(snapshot.courses),
            total_pos=len(outcomes),
            total_enrollments=len(filtered.enrollments),
            total_survey_responses=len(filtered.survey_responses),
            total_feedback=len(filtered.competency_ratings),
        ),
    )


def get_analytics(db: Session, program_id: Optional[int] = None, year: Optional[str] = None) -> AnalyticsResponse:
    logger.info(f"PO analytics 집계 시작: program_id={program_id}, year={year}")
    snapshot = load_snapshot(db)
    result = build_analytics(snapshot, program_id=program_id, year=year)
    logger.debug(
        f"PO analytics 집계 완료: POs={len(result.po_analytics)}, "
        f"enrollments={result.summary.total_enrollments}, years={result.available_years}"
    )
    return result
