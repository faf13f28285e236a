from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime
from database.db import Base
from models.enums import ProgramType

class Program(Base):
    __tablename__ = "programs"  # 학위 과정 테이블

    id = Column(Integer, primary_key=True, index=True)                          # 과정 고유 ID (Primary Key)
    code = Column(String(50), nullable=False, unique=True)                      # 과정 코드 (예: BSCE)
    name = Column(String(200), nullable=False)                                  # 과정 이름
    type = Column(String(20), nullable=False, default=ProgramType.NON_BOARD.value)  # board / non_board
    program_head_id = Column(String(255))                                       # 과정 책임자 사용자 ID
    created_at = Column(DateTime, default=datetime.now)                         # 생성 시각


class ProgramPoMapping(Base):
    __tablename__ = "program_po_mappings"  # 과정 ↔ PO 연결 테이블

    id = Column(Integer, primary_key=True, index=True)
    program_id = Column(Integer, nullable=False, index=True)   # 과정 ID
    po_id = Column(Integer, nullable=False, index=True)        # PO ID
