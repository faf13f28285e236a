"""
schemas/analytics.py

- GET /v1/analytics 응답 스키마
- 프론트엔드 계약에 맞춰 camelCase 별칭으로 직렬화 (poAnalytics, availableYears ...)
- 내부에서는 snake_case 필드명으로 생성 (populate_by_name=True)
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class OutcomeRef(CamelModel):
    id: int
    program_id: int
    code: str
    description: str


class POAnalytics(CamelModel):
    po: OutcomeRef
    grade_count: int             # 반영된 성적 수
    avg_grade: float             # 평균 점수 (0~100)
    survey_count: int            # 반영된 설문 답변 수
    avg_survey: float            # 평균 설문 점수 (1~5)
    feedback_count: int          # 반영된 고용주 평가 수
    avg_feedback: float          # 평균 고용주 평점 (1~5)
    board_exam_score: float      # 면허시험 합격률 환산 점수 (0~5)
    is_board_program: bool
    overall_score: float         # 종합 달성 점수 (0~5)


class TermTrend(CamelModel):
    term: str
    avg_grade: float
    count: int


class BoardExamYearTrend(CamelModel):
    year: str
    passers: int
    takers: int
    passing_rate: int            # 정수 퍼센트


class SurveyYearTrend(CamelModel):
    year: str
    responses: int
    avg_rating: float


class FeedbackYearTrend(CamelModel):
    year: str
    count: int
    avg_rating: float


class AnalyticsSummary(CamelModel):
    total_courses: int = 0
    total_pos: int = Field(0, alias="totalPOs")   # to_camel 결과(totalPos) 대신 계약 키 사용
    total_enrollments: int = 0
    total_survey_responses: int = 0
    total_feedback: int = 0


class AnalyticsResponse(CamelModel):
    po_analytics: List[POAnalytics] = Field(default_factory=list)
    trend_data: List[TermTrend] = Field(default_factory=list)
    board_exam_trend: List[BoardExamYearTrend] = Field(default_factory=list)
    survey_trend: List[SurveyYearTrend] = Field(default_factory=list)
    feedback_trend: List[FeedbackYearTrend] = Field(default_factory=list)
    available_years: List[str] = Field(default_factory=list)
    summary: AnalyticsSummary = Field(default_factory=AnalyticsSummary)
