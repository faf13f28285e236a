from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime
from database.db import Base

class Competency(Base):
    __tablename__ = "competencies"  # 고용주 평가 역량 테이블

    id = Column(Integer, primary_key=True, index=True)
    program_id = Column(Integer, nullable=False, index=True)    # 과정 ID
    name = Column(String(255), nullable=False)                  # 역량 이름
    description = Column(Text)                                  # 설명
    created_at = Column(DateTime, default=datetime.now)


class CompetencyPoMapping(Base):
    __tablename__ = "competency_po_mappings"  # 역량 ↔ PO 연결 테이블

    id = Column(Integer, primary_key=True, index=True)
    competency_id = Column(Integer, nullable=False, index=True)
    po_id = Column(Integer, nullable=False, index=True)


class CompetencyRating(Base):
    __tablename__ = "competency_ratings"  # 고용주 역량 평가 테이블

    id = Column(Integer, primary_key=True, index=True)
    competency_id = Column(Integer, nullable=False, index=True)  # 역량 ID
    employer_id = Column(String(255))                            # 평가한 고용주 사용자 ID
    employer_name = Column(String(200))                          # 고용주 이름
    graduate_id = Column(String(255))                            # 평가 대상 졸업생 ID
    graduate_name = Column(String(200))                          # 졸업생 이름
    batch = Column(String(20))                                   # 졸업 기수 (예: 2024)
    rating = Column(Integer, nullable=False)                     # 평점 (1~5)
    comment = Column(Text)                                       # 코멘트
    created_at = Column(DateTime, default=datetime.now)          # 평가 시각
