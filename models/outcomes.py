from sqlalchemy import Column, Integer, String, Text
from database.db import Base

class ProgramOutcome(Base):
    __tablename__ = "program_outcomes"  # 과정 성과(PO) 테이블

    id = Column(Integer, primary_key=True, index=True)         # PO 고유 ID (Primary Key)
    program_id = Column(Integer, nullable=False, index=True)   # 소속 과정 ID
    code = Column(String(50), nullable=False)                  # PO 코드 (예: PO1)
    description = Column(Text, nullable=False)                 # PO 설명
