from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from models.enums import QuestionType, TargetRole

# ✅ 설문
class SurveyBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    title: str                                       # 설문 제목
    target_role: TargetRole                          # 대상
    description: Optional[str] = None
    is_active: bool = True
    program_id: Optional[int] = None

class Survey(SurveyBase):
    id: int

    model_config = ConfigDict(use_enum_values=True, validate_default=True, from_attributes=True)


# ✅ 문항
class SurveyQuestionCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    text: str                                        # 문항 내용
    type: QuestionType = QuestionType.SCALE          # scale / text
    linked_po_id: Optional[int] = None               # 연결 PO

class SurveyQuestion(SurveyQuestionCreate):
    id: int
    survey_id: int

    model_config = ConfigDict(use_enum_values=True, validate_default=True, from_attributes=True)


# ✅ 설문 생성/수정 (None 이면 해당 하위 목록 유지, 목록이면 전체 교체)
class SurveyCreate(SurveyBase):
    questions: Optional[List[SurveyQuestionCreate]] = None
    course_ids: Optional[List[int]] = None


# ✅ 응답 (응답 1건 + 문항별 답변 묶음)
class SurveyAnswerCreate(BaseModel):
    question_id: int
    answer_value: Optional[int] = Field(None, ge=1, le=5)   # 척도 답변
    answer_text: Optional[str] = None                        # 서술형 답변

class SurveyAnswer(SurveyAnswerCreate):
    id: int
    response_id: int

    class Config:
        from_attributes = True


class SurveyResponseCreate(BaseModel):
    user_id: Optional[str] = None
    respondent_name: Optional[str] = None
    submitted_at: Optional[datetime] = None          # 비우면 서버 시각
    answers: List[SurveyAnswerCreate] = Field(default_factory=list)

class SurveyResponse(BaseModel):
    id: int
    survey_id: int
    user_id: Optional[str] = None
    respondent_name: Optional[str] = None
    submitted_at: Optional[datetime] = None

    class Config:
        from_attributes = True
