from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.competencies import CompetencyPoMapping as CompetencyPoMappingModel
from models.courses import CoursePoMapping as CoursePoMappingModel
from models.outcomes import ProgramOutcome as OutcomeModel
from models.programs import ProgramPoMapping as ProgramPoMappingModel
from schemas.outcomes import ProgramOutcome as OutcomeSchema, ProgramOutcomeCreate

router = APIRouter(prefix="/outcomes", tags=["과정 성과(PO)"])


def _not_found():
    return {"success": False, "error": {"code": 404, "message": "Program outcome not found"}}


# ✅ [CREATE] PO 추가
@router.post("/")
def create_outcome(outcome: ProgramOutcomeCreate, db: Session = Depends(get_db)):
    db_outcome = OutcomeModel(**outcome.model_dump())
    db.add(db_outcome)
    db.commit()
    db.refresh(db_outcome)
    return {
        "success": True,
        "data": OutcomeSchema.model_validate(db_outcome).model_dump(),
        "message": "Program outcome created successfully"
    }

# ✅ [READ] PO 목록 (과정별 필터 선택)
@router.get("/")
def read_outcomes(program_id: Optional[int] = None, db: Session = Depends(get_db)):
    query = db.query(OutcomeModel)
    if program_id is not None:
        query = query.filter(OutcomeModel.program_id == program_id)
    records = query.order_by(OutcomeModel.id).all()
    return {"success": True, "data": [OutcomeSchema.model_validate(r).model_dump() for r in records]}

# ✅ [READ] 특정 PO 조회
@router.get("/{outcome_id}")
def read_outcome(outcome_id: int, db: Session = Depends(get_db)):
    outcome = db.query(OutcomeModel).filter(OutcomeModel.id == outcome_id).first()
    if outcome is None:
        return _not_found()
    return {"success": True, "data": OutcomeSchema.model_validate(outcome).model_dump()}

# ✅ [UPDATE] PO 수정
@router.put("/{outcome_id}")
def update_outcome(outcome_id: int, updated: ProgramOutcomeCreate, db: Session = Depends(get_db)):
    outcome = db.query(OutcomeModel).filter(OutcomeModel.id == outcome_id).first()
    if outcome is None:
        return _not_found()

    for key, value in updated.model_dump().items():
        setattr(outcome, key, value)

    db.commit()
    db.refresh(outcome)
    return {"success": True, "data": OutcomeSchema.model_validate(outcome).model_dump()}

# ✅ [DELETE] PO 삭제 (연결된 매핑도 함께 정리)
@router.delete("/{outcome_id}")
def delete_outcome(outcome_id: int, db: Session = Depends(get_db)):
    outcome = db.query(OutcomeModel).filter(OutcomeModel.id == outcome_id).first()
    if outcome is None:
        return _not_found()

    db.query(CoursePoMappingModel).filter(CoursePoMappingModel.po_id == outcome_id).delete()
    db.query(CompetencyPoMappingModel).filter(CompetencyPoMappingModel.po_id == outcome_id).delete()
    db.query(ProgramPoMappingModel).filter(ProgramPoMappingModel.po_id == outcome_id).delete()
    db.delete(outcome)
    db.commit()
    return {"success": True, "data": {"outcome_id": outcome_id, "message": "Program outcome deleted successfully"}}
