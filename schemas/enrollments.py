from typing import Optional

from pydantic import BaseModel, Field

# ✅ 입력용 (POST/PUT)
class EnrollmentCreate(BaseModel):
    user_id: str                                     # 학생 사용자 ID
    course_id: int                                   # 교과목 ID
    grade: int = Field(..., ge=0, le=100)            # 점수 (0~100)
    academic_year: str                               # 학년도 (예: 2024-2025)
    term: str                                        # 학기 (예: Fall 2024)
    program_id: Optional[int] = None                 # 과정 ID

# ✅ 출력용
class Enrollment(EnrollmentCreate):
    id: int

    class Config:
        from_attributes = True
