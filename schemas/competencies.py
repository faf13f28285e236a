from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

# ✅ 역량 입력/출력
class CompetencyBase(BaseModel):
    program_id: int                                  # 과정 ID
    name: str                                        # 역량 이름
    description: Optional[str] = None                # 설명

class CompetencyCreate(CompetencyBase):
    po_ids: Optional[List[int]] = None               # 연결할 PO 목록 (수정 시 None 이면 매핑 유지)

class Competency(CompetencyBase):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ✅ 역량 ↔ PO 매핑
class CompetencyPoMappingCreate(BaseModel):
    po_id: int

class CompetencyPoMapping(CompetencyPoMappingCreate):
    id: int
    competency_id: int

    class Config:
        from_attributes = True


# ✅ 고용주 평가
class CompetencyRatingCreate(BaseModel):
    employer_id: Optional[str] = None
    employer_name: Optional[str] = None
    graduate_id: Optional[str] = None
    graduate_name: Optional[str] = None
    batch: Optional[str] = None                      # 졸업 기수 (예: 2024)
    rating: int = Field(..., ge=1, le=5)             # 평점 (1~5)
    comment: Optional[str] = None

class CompetencyRating(CompetencyRatingCreate):
    id: int
    competency_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
