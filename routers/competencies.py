from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from database.db import get_db
from models.competencies import (
    Competency as CompetencyModel,
    CompetencyPoMapping as CompetencyPoMappingModel,
    CompetencyRating as CompetencyRatingModel,
)
from models.outcomes import ProgramOutcome as OutcomeModel
from schemas.competencies import (
    Competency as CompetencySchema,
    CompetencyCreate,
    CompetencyPoMapping as CompetencyPoMappingSchema,
    CompetencyPoMappingCreate,
    CompetencyRating as CompetencyRatingSchema,
    CompetencyRatingCreate,
)

router = APIRouter(prefix="/competencies", tags=["고용주 평가 역량"])


def _not_found(message: str = "Competency not found"):
    return {"success": False, "error": {"code": 404, "message": message}}


def _get_competency(db: Session, competency_id: int):
    return db.query(CompetencyModel).filter(CompetencyModel.id == competency_id).first()


def _missing_outcomes(db: Session, po_ids: List[int]) -> List[int]:
    if not po_ids:
        return []
    found = {o.id for o in db.query(OutcomeModel.id).filter(OutcomeModel.id.in_(po_ids)).all()}
    return [p for p in po_ids if p not in found]


def _replace_mappings(db: Session, competency_id: int, po_ids: List[int]):
    db.query(CompetencyPoMappingModel).filter(CompetencyPoMappingModel.competency_id == competency_id).delete()
    db.add_all([CompetencyPoMappingModel(competency_id=competency_id, po_id=po_id) for po_id in po_ids])


def _competency_data(db: Session, competency: CompetencyModel) -> dict:
    data = CompetencySchema.model_validate(competency).model_dump()
    data["po_ids"] = [
        m.po_id for m in db.query(CompetencyPoMappingModel)
        .filter(CompetencyPoMappingModel.competency_id == competency.id)
        .order_by(CompetencyPoMappingModel.id)
        .all()
    ]
    return data


# ==========================================================
# [1단계] 역량 CRUD (po_ids 로 PO 매핑 동시 관리)
# ==========================================================

@router.post("/")
def create_competency(competency: CompetencyCreate, db: Session = Depends(get_db)):
    po_ids = list(dict.fromkeys(competency.po_ids or []))
    missing = _missing_outcomes(db, po_ids)
    if missing:
        return _not_found(f"Program outcomes not found: {missing}")

    db_competency = CompetencyModel(**competency.model_dump(exclude={"po_ids"}))
    db.add(db_competency)
    db.flush()   # competency.id 확보
    _replace_mappings(db, db_competency.id, po_ids)
    db.commit()
    db.refresh(db_competency)
    return {
        "success": True,
        "data": _competency_data(db, db_competency),
        "message": "Competency created successfully"
    }

@router.get("/")
def read_competencies(program_id: Optional[int] = None, db: Session = Depends(get_db)):
    query = db.query(CompetencyModel)
    if program_id is not None:
        query = query.filter(CompetencyModel.program_id == program_id)
    records = query.order_by(CompetencyModel.id).all()
    return {"success": True, "data": [CompetencySchema.model_validate(r).model_dump() for r in records]}

# ✅ [READ] 과정별 고용주 평가 목록 (최신순)
# - /{competency_id} 보다 먼저 등록해야 "ratings" 가 ID 로 해석되지 않음
@router.get("/ratings")
def read_program_ratings(program_id: Optional[int] = None, db: Session = Depends(get_db)):
    query = db.query(CompetencyRatingModel)
    if program_id is not None:
        competency_ids = select(CompetencyModel.id).where(CompetencyModel.program_id == program_id)
        query = query.filter(CompetencyRatingModel.competency_id.in_(competency_ids))
    records = query.order_by(CompetencyRatingModel.created_at.desc(), CompetencyRatingModel.id.desc()).all()
    return {"success": True, "data": [CompetencyRatingSchema.model_validate(r).model_dump() for r in records]}

@router.get("/{competency_id}")
def read_competency(competency_id: int, db: Session = Depends(get_db)):
    competency = _get_competency(db, competency_id)
    if competency is None:
        return _not_found()
    return {"success": True, "data": _competency_data(db, competency)}

# ✅ [UPDATE] 역량 수정 (po_ids 가 주어지면 매핑 전체 교체)
@router.put("/{competency_id}")
def update_competency(competency_id: int, updated: CompetencyCreate, db: Session = Depends(get_db)):
    competency = _get_competency(db, competency_id)
    if competency is None:
        return _not_found()

    po_ids = None if updated.po_ids is None else list(dict.fromkeys(updated.po_ids))
    missing = _missing_outcomes(db, po_ids or [])
    if missing:
        return _not_found(f"Program outcomes not found: {missing}")

    for key, value in updated.model_dump(exclude={"po_ids"}).items():
        setattr(competency, key, value)
    if po_ids is not None:
        _replace_mappings(db, competency_id, po_ids)

    db.commit()
    db.refresh(competency)
    return {
        "success": True,
        "data": _competency_data(db, competency),
        "message": "Competency updated successfully"
    }

@router.delete("/{competency_id}")
def delete_competency(competency_id: int, db: Session = Depends(get_db)):
    competency = _get_competency(db, competency_id)
    if competency is None:
        return _not_found()

    db.query(CompetencyPoMappingModel).filter(CompetencyPoMappingModel.competency_id == competency_id).delete()
    db.query(CompetencyRatingModel).filter(CompetencyRatingModel.competency_id == competency_id).delete()
    db.delete(competency)
    db.commit()
    return {"success": True, "data": {"competency_id": competency_id, "message": "Competency deleted successfully"}}

# ==========================================================
# [2단계] 역량 ↔ PO 매핑 (개별 추가)
# ==========================================================

@router.post("/{competency_id}/outcomes")
def link_competency_outcome(competency_id: int, mapping: CompetencyPoMappingCreate, db: Session = Depends(get_db)):
    if _get_competency(db, competency_id) is None:
        return _not_found()
    if db.query(OutcomeModel).filter(OutcomeModel.id == mapping.po_id).first() is None:
        return _not_found("Program outcome not found")

    db_mapping = CompetencyPoMappingModel(competency_id=competency_id, po_id=mapping.po_id)
    db.add(db_mapping)
    db.commit()
    db.refresh(db_mapping)
    return {"success": True, "data": CompetencyPoMappingSchema.model_validate(db_mapping).model_dump()}

@router.get("/{competency_id}/outcomes")
def read_competency_outcome_links(competency_id: int, db: Session = Depends(get_db)):
    records = db.query(CompetencyPoMappingModel).filter(CompetencyPoMappingModel.competency_id == competency_id).all()
    return {"success": True, "data": [CompetencyPoMappingSchema.model_validate(r).model_dump() for r in records]}

# ==========================================================
# [3단계] 고용주 평가
# ==========================================================

@router.post("/{competency_id}/ratings")
def create_rating(competency_id: int, rating: CompetencyRatingCreate, db: Session = Depends(get_db)):
    if _get_competency(db, competency_id) is None:
        return _not_found()

    db_rating = CompetencyRatingModel(competency_id=competency_id, **rating.model_dump())
    db.add(db_rating)
    db.commit()
    db.refresh(db_rating)
    return {
        "success": True,
        "data": CompetencyRatingSchema.model_validate(db_rating).model_dump(),
        "message": "Rating submitted successfully"
    }

@router.get("/{competency_id}/ratings")
def read_ratings(competency_id: int, db: Session = Depends(get_db)):
    records = (
        db.query(CompetencyRatingModel)
        .filter(CompetencyRatingModel.competency_id == competency_id)
        .order_by(CompetencyRatingModel.id)
        .all()
    )
    return {"success": True, "data": [CompetencyRatingSchema.model_validate(r).model_dump() for r in records]}
