from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from database.db import Base
from models.enums import QuestionType

class Survey(Base):
    __tablename__ = "surveys"  # 설문 테이블

    id = Column(Integer, primary_key=True, index=True)          # 설문 고유 ID
    title = Column(String(200), nullable=False)                 # 설문 제목
    target_role = Column(String(20), nullable=False)            # 대상 (student / graduate / employer)
    description = Column(Text)                                  # 설명
    is_active = Column(Boolean, default=True)                   # 응답 가능 여부
    program_id = Column(Integer)                                # 과정 ID (NULL 가능)


class SurveyQuestion(Base):
    __tablename__ = "survey_questions"  # 설문 문항 테이블

    id = Column(Integer, primary_key=True, index=True)
    survey_id = Column(Integer, nullable=False, index=True)                  # 설문 ID
    text = Column(Text, nullable=False)                                      # 문항 내용
    type = Column(String(10), nullable=False, default=QuestionType.SCALE.value)  # scale / text
    linked_po_id = Column(Integer)                                           # 연결된 PO ID (NULL 가능)


class SurveyResponse(Base):
    __tablename__ = "survey_responses"  # 설문 응답 테이블 (응답자 1명 = 1행)

    id = Column(Integer, primary_key=True, index=True)
    survey_id = Column(Integer, nullable=False, index=True)     # 설문 ID
    user_id = Column(String(255))                               # 응답자 사용자 ID (익명이면 NULL)
    respondent_name = Column(String(200))                       # 응답자 이름
    submitted_at = Column(DateTime, default=datetime.now)       # 제출 시각


class SurveyAnswer(Base):
    __tablename__ = "survey_answers"  # 문항별 답변 테이블

    id = Column(Integer, primary_key=True, index=True)
    response_id = Column(Integer, nullable=False, index=True)   # 응답 ID
    question_id = Column(Integer, nullable=False, index=True)   # 문항 ID
    answer_value = Column(Integer)                              # 척도 답변 (1~5)
    answer_text = Column(Text)                                  # 서술형 답변


class SurveyCourseLink(Base):
    __tablename__ = "survey_course_links"  # 설문 ↔ 교과목 연결 테이블

    id = Column(Integer, primary_key=True, index=True)
    survey_id = Column(Integer, nullable=False, index=True)     # 설문 ID
    course_id = Column(Integer, nullable=False, index=True)     # 교과목 ID
