from pydantic import BaseModel

# ✅ 입력용 (POST/PUT)
class ProgramOutcomeCreate(BaseModel):
    program_id: int                          # 소속 과정 ID
    code: str                                # PO 코드 (예: PO1)
    description: str                         # PO 설명

# ✅ 출력용
class ProgramOutcome(ProgramOutcomeCreate):
    id: int

    class Config:
        from_attributes = True
