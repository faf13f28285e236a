from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime
from database.db import Base

class BoardExamResult(Base):
    __tablename__ = "board_exam_results"  # 국가 면허시험 결과 테이블 (과정 단위)

    id = Column(Integer, primary_key=True, index=True)          # 결과 고유 ID
    program_id = Column(Integer, nullable=False, index=True)    # 과정 ID
    exam_name = Column(String(200), nullable=False)             # 시험명
    exam_date = Column(String(50))                              # 시험 일자 (자유 입력, 예: October 2025)
    passers = Column(Integer, nullable=False, default=0)        # 합격자 수
    takers = Column(Integer, nullable=False, default=0)         # 응시자 수
    notes = Column(Text)                                        # 비고
    created_at = Column(DateTime, default=datetime.now)         # 등록 시각
