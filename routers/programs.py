from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database.db import get_db
from models.programs import Program as ProgramModel, ProgramPoMapping as ProgramPoMappingModel
from schemas.programs import (
    Program as ProgramSchema,
    ProgramCreate,
    ProgramPoMapping as ProgramPoMappingSchema,
    ProgramPoMappingCreate,
)

router = APIRouter(prefix="/programs", tags=["학위 과정"])


def _not_found():
    return {"success": False, "error": {"code": 404, "message": "Program not found"}}


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 과정 추가
@router.post("/")
def create_program(program: ProgramCreate, db: Session = Depends(get_db)):
    db_program = ProgramModel(**program.model_dump())
    db.add(db_program)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=f"Program code already exists: {program.code}")
    db.refresh(db_program)
    return {
        "success": True,
        "data": ProgramSchema.model_validate(db_program).model_dump(),
        "message": "Program created successfully"
    }

# ✅ [READ] 전체 과정 조회
@router.get("/")
def read_programs(db: Session = Depends(get_db)):
    records = db.query(ProgramModel).order_by(ProgramModel.id).all()
    return {
        "success": True,
        "data": [ProgramSchema.model_validate(r).model_dump() for r in records]
    }

# ✅ [READ] 특정 과정 조회
@router.get("/{program_id}")
def read_program(program_id: int, db: Session = Depends(get_db)):
    program = db.query(ProgramModel).filter(ProgramModel.id == program_id).first()
    if program is None:
        return _not_found()
    return {"success": True, "data": ProgramSchema.model_validate(program).model_dump()}

# ✅ [UPDATE] 과정 수정
@router.put("/{program_id}")
def update_program(program_id: int, updated: ProgramCreate, db: Session = Depends(get_db)):
    program = db.query(ProgramModel).filter(ProgramModel.id == program_id).first()
    if program is None:
        return _not_found()

    for key, value in updated.model_dump().items():
        setattr(program, key, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=f"Program code already exists: {updated.code}")
    db.refresh(program)
    return {
        "success": True,
        "data": ProgramSchema.model_validate(program).model_dump(),
        "message": "Program updated successfully"
    }

# ✅ [DELETE] 과정 삭제
@router.delete("/{program_id}")
def delete_program(program_id: int, db: Session = Depends(get_db)):
    program = db.query(ProgramModel).filter(ProgramModel.id == program_id).first()
    if program is None:
        return _not_found()

    db.query(ProgramPoMappingModel).filter(ProgramPoMappingModel.program_id == program_id).delete()
    db.delete(program)
    db.commit()
    return {"success": True, "data": {"program_id": program_id, "message": "Program deleted successfully"}}

# ==========================================================
# [2단계] 과정 ↔ PO 매핑
# ==========================================================

@router.post("/{program_id}/outcomes")
def link_program_outcome(program_id: int, mapping: ProgramPoMappingCreate, db: Session = Depends(get_db)):
    if db.query(ProgramModel).filter(ProgramModel.id == program_id).first() is None:
        return _not_found()

    db_mapping = ProgramPoMappingModel(program_id=program_id, po_id=mapping.po_id)
    db.add(db_mapping)
    db.commit()
    db.refresh(db_mapping)
    return {"success": True, "data": ProgramPoMappingSchema.model_validate(db_mapping).model_dump()}

@router.get("/{program_id}/outcomes")
def read_program_outcome_links(program_id: int, db: Session = Depends(get_db)):
    records = db.query(ProgramPoMappingModel).filter(ProgramPoMappingModel.program_id == program_id).all()
    return {"success": True, "data": [ProgramPoMappingSchema.model_validate(r).model_dump() for r in records]}
