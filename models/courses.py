from sqlalchemy import Column, Integer, String
from database.db import Base

class Course(Base):
    __tablename__ = "courses"  # 교과목 테이블

    id = Column(Integer, primary_key=True, index=True)          # 교과목 고유 ID (Primary Key)
    code = Column(String(50), nullable=False, unique=True)      # 교과목 코드 (예: CE101)
    name = Column(String(200), nullable=False)                  # 교과목 이름
    credits = Column(Integer, nullable=False, default=3)        # 학점
    program_id = Column(Integer)                                # 소속 과정 ID (NULL 가능)


class CoursePoMapping(Base):
    __tablename__ = "course_po_mappings"  # 교과목 ↔ PO 연결 테이블

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, nullable=False, index=True)    # 교과목 ID
    po_id = Column(Integer, nullable=False, index=True)        # PO ID
    weight = Column(Integer, default=1)                        # 가중치 (집계에는 미사용)
