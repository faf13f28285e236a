from sqlalchemy import Column, Integer, String
from database.db import Base

class Enrollment(Base):
    __tablename__ = "enrollments"  # 수강/성적 테이블 (학생-과목-학기 단위 1행)

    id = Column(Integer, primary_key=True, index=True)          # 성적 고유 ID (Primary Key)
    user_id = Column(String(255), nullable=False)               # 학생 사용자 ID
    course_id = Column(Integer, nullable=False, index=True)     # 교과목 ID
    grade = Column(Integer, nullable=False)                     # 점수 (0~100)
    academic_year = Column(String(20), nullable=False)          # 학년도 (예: 2024-2025)
    term = Column(String(100), nullable=False)                  # 학기 (예: Fall 2024)
    program_id = Column(Integer)                                # 과정 ID (NULL 가능)
