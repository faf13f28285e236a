from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from models.enums import ProgramType

# ✅ 입력용 (POST/PUT)
class ProgramCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    code: str                                        # 과정 코드
    name: str                                        # 과정 이름
    type: ProgramType = ProgramType.NON_BOARD        # board / non_board
    program_head_id: Optional[str] = None            # 과정 책임자 ID

# ✅ 출력용
class Program(ProgramCreate):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(use_enum_values=True, validate_default=True, from_attributes=True)


class ProgramPoMappingCreate(BaseModel):
    po_id: int                                       # 연결할 PO ID

class ProgramPoMapping(ProgramPoMappingCreate):
    id: int
    program_id: int

    class Config:
        from_attributes = True
