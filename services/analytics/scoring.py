"""
services/analytics/scoring.py

PO(Program Outcome) 단위 달성 점수 계산.

4가지 하위 점수를 0~5 척도로 맞춘 뒤, 값이 있는(> 0) 항목만 평균낸다.
  - 성적: PO에 연결된 교과목 성적 평균 (0~100) → /100*5
  - 설문: PO에 연결된 문항의 척도 답변 평균 (1~5)
  - 고용주 평가: PO에 연결된 역량 평점 평균 (1~5)
  - 면허시험: 과정 전체 합격률 (0~1) → *5, board 과정일 때만 반영

주의: 하위 점수가 정확히 0 이면 "데이터 없음"과 구분되지 않아 평균에서 빠진다.
"""

import math
from typing import Iterable, List, Optional, Sequence

from models.board_exams import BoardExamResult
from models.competencies import CompetencyPoMapping, CompetencyRating
from models.courses import CoursePoMapping
from models.enrollments import Enrollment
from models.enums import ProgramType
from models.outcomes import ProgramOutcome
from models.programs import Program
from models.surveys import SurveyAnswer, SurveyQuestion
from schemas.analytics import OutcomeRef, POAnalytics


def round1(value: float) -> float:
    """소수 첫째 자리 반올림 (half-up: 3.25 → 3.3)"""
    return math.floor(value * 10 + 0.5) / 10


def round_percent(ratio: float) -> int:
    """0~1 비율 → 정수 퍼센트 (half-up)"""
    return int(math.floor(ratio * 100 + 0.5))


def mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0


def is_board(program: Optional[Program]) -> bool:
    return program is not None and program.type == ProgramType.BOARD.value


def compute_po_score(
    po: ProgramOutcome,
    *,
    course_mappings: Iterable[CoursePoMapping],
    enrollments: Iterable[Enrollment],
    questions: Iterable[SurveyQuestion],
    answers: Iterable[SurveyAnswer],
    competency_mappings: Iterable[CompetencyPoMapping],
    ratings: Iterable[CompetencyRating],
    program: Optional[Program],
    board_exams: Iterable[BoardExamResult],
) -> POAnalytics:
    # 1) 성적
    course_ids = {m.course_id for m in course_mappings if m.po_id == po.id}
    grades = [e.grade for e in enrollments if e.course_id in course_ids]
    avg_grade = mean(grades)

    # 2) 설문 (answer_value 가 0/None 인 답변은 제외 → 서술형 답변 자동 제외)
    question_ids = {q.id for q in questions if q.linked_po_id == po.id}
    survey_values = [a.answer_value for a in answers if a.question_id in question_ids and a.answer_value]
    avg_survey = mean(survey_values)

    # 3) 고용주 평가 (역량 ↔ PO 매핑 경유)
    competency_ids = {m.competency_id for m in competency_mappings if m.po_id == po.id}
    feedback_values = [r.rating for r in ratings if r.competency_id in competency_ids]
    avg_feedback = mean(feedback_values)

    # 4) 면허시험 (PO 무관, 과정 단위)
    program_exams = [be for be in board_exams if be.program_id == po.program_id]
    total_passers = sum(be.passers for be in program_exams)
    total_takers = sum(be.takers for be in program_exams)
    avg_board_exam = (total_passers / total_takers) * 5 if total_takers > 0 else 0

    # 5) 값이 있는 하위 점수만 모음
    board_program = is_board(program)
    scores: List[float] = []
    if avg_grade > 0:
        scores.append(avg_grade / 100 * 5)
    if avg_survey > 0:
        scores.append(avg_survey)
    if avg_feedback > 0:
        scores.append(avg_feedback)
    if board_program and avg_board_exam > 0:
        scores.append(avg_board_exam)

    # 6) 종합 점수
    overall_score = round1(mean(scores)) if scores else 0

    return POAnalytics(
        po=OutcomeRef(id=po.id, program_id=po.program_id, code=po.code, description=po.description),
        grade_count=len(grades),
        avg_grade=round1(avg_grade),
        survey_count=len(survey_values),
        avg_survey=round1(avg_survey),
        feedback_count=len(feedback_values),
        avg_feedback=round1(avg_feedback),
        board_exam_score=round1(avg_board_exam),
        is_board_program=board_program,
        overall_score=overall_score,
    )
