from typing import List, Optional

from pydantic import BaseModel, Field

# ✅ 입력용 (POST/PUT)
class CourseCreate(BaseModel):
    code: str                                        # 교과목 코드
    name: str                                        # 교과목 이름
    credits: int = Field(3, ge=0)                    # 학점
    program_id: Optional[int] = None                 # 소속 과정 ID

# ✅ 출력용
class Course(CourseCreate):
    id: int

    class Config:
        from_attributes = True


class CoursePoMappingCreate(BaseModel):
    po_id: int                                       # 연결할 PO ID
    weight: int = 1                                  # 가중치 (집계 미사용)

class CoursePoMapping(CoursePoMappingCreate):
    id: int
    course_id: int

    class Config:
        from_attributes = True


class CoursePoMappingReplace(BaseModel):
    po_ids: List[int] = Field(default_factory=list)  # 교체할 PO ID 목록 (빈 목록이면 전체 해제)
