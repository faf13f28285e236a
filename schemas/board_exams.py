from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

# ✅ 입력용 (POST/PUT)
class BoardExamResultCreate(BaseModel):
    program_id: int                                  # 과정 ID
    exam_name: str                                   # 시험명
    exam_date: Optional[str] = None                  # 시험 일자 (자유 입력, 연도 포함)
    passers: int = Field(0, ge=0)                    # 합격자 수
    takers: int = Field(0, ge=0)                     # 응시자 수
    notes: Optional[str] = None                      # 비고

    @model_validator(mode="after")
    def _passers_within_takers(self):
        if self.passers > self.takers:
            raise ValueError("passers cannot exceed takers")
        return self

# ✅ 출력용
class BoardExamResult(BoardExamResultCreate):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
