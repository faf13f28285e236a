"""
services/analytics/snapshot.py

- 집계에 필요한 원본 테이블을 한 번에 읽어 두는 읽기 전용 스냅샷
- build_analytics 는 스냅샷만 받으므로 DB 없이 테스트 가능
"""

from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy.orm import Session

from models.board_exams import BoardExamResult
from models.competencies import CompetencyPoMapping, CompetencyRating
from models.courses import Course, CoursePoMapping
from models.enrollments import Enrollment
from models.outcomes import ProgramOutcome
from models.programs import Program
from models.surveys import SurveyAnswer, SurveyQuestion, SurveyResponse


@dataclass(frozen=True)
class AnalyticsSnapshot:
    """집계 시점의 원본 테이블 스냅샷 (읽기 전용)"""
    outcomes: List[ProgramOutcome] = field(default_factory=list)
    courses: List[Course] = field(default_factory=list)
    course_mappings: List[CoursePoMapping] = field(default_factory=list)
    enrollments: List[Enrollment] = field(default_factory=list)
    questions: List[SurveyQuestion] = field(default_factory=list)
    responses: List[SurveyResponse] = field(default_factory=list)
    answers: List[SurveyAnswer] = field(default_factory=list)
    board_exams: List[BoardExamResult] = field(default_factory=list)
    programs: List[Program] = field(default_factory=list)
    competency_mappings: List[CompetencyPoMapping] = field(default_factory=list)
    competency_ratings: List[CompetencyRating] = field(default_factory=list)

    def program(self, program_id: int) -> Optional[Program]:
        return next((p for p in self.programs if p.id == program_id), None)


def load_snapshot(db: Session) -> AnalyticsSnapshot:
    """요청마다 전체 테이블을 다시 읽는다 (캐시 없음)"""
    return AnalyticsSnapshot(
        outcomes=db.query(ProgramOutcome).order_by(ProgramOutcome.id).all(),
        courses=db.query(Course).all(),
        course_mappings=db.query(CoursePoMapping).all(),
        enrollments=db.query(Enrollment).order_by(Enrollment.id).all(),
        questions=db.query(SurveyQuestion).all(),
        responses=db.query(SurveyResponse).order_by(SurveyResponse.id).all(),
        answers=db.query(SurveyAnswer).all(),
        board_exams=db.query(BoardExamResult).order_by(BoardExamResult.id).all(),
        programs=db.query(Program).all(),
        competency_mappings=db.query(CompetencyPoMapping).all(),
        competency_ratings=db.query(CompetencyRating).order_by(CompetencyRating.id).all(),
    )
