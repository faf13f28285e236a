from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.board_exams import BoardExamResult as BoardExamModel
from schemas.board_exams import BoardExamResult as BoardExamSchema, BoardExamResultCreate

router = APIRouter(prefix="/board-exams", tags=["면허시험 결과"])


def _not_found():
    return {"success": False, "error": {"code": 404, "message": "Board exam result not found"}}


# ✅ [CREATE] 면허시험 결과 등록
@router.post("/")
def create_board_exam(result: BoardExamResultCreate, db: Session = Depends(get_db)):
    db_result = BoardExamModel(**result.model_dump())
    db.add(db_result)
    db.commit()
    db.refresh(db_result)
    return {
        "success": True,
        "data": BoardExamSchema.model_validate(db_result).model_dump(),
        "message": "Board exam result created successfully"
    }

# ✅ [READ] 결과 목록 (과정별 필터 선택)
@router.get("/")
def read_board_exams(program_id: Optional[int] = None, db: Session = Depends(get_db)):
    query = db.query(BoardExamModel)
    if program_id is not None:
        query = query.filter(BoardExamModel.program_id == program_id)
    records = query.order_by(BoardExamModel.id).all()
    return {"success": True, "data": [BoardExamSchema.model_validate(r).model_dump() for r in records]}

# ✅ [READ] 특정 결과 조회
@router.get("/{result_id}")
def read_board_exam(result_id: int, db: Session = Depends(get_db)):
    result = db.query(BoardExamModel).filter(BoardExamModel.id == result_id).first()
    if result is None:
        return _not_found()
    return {"success": True, "data": BoardExamSchema.model_validate(result).model_dump()}

# ✅ [UPDATE] 결과 수정
@router.put("/{result_id}")
def update_board_exam(result_id: int, updated: BoardExamResultCreate, db: Session = Depends(get_db)):
    result = db.query(BoardExamModel).filter(BoardExamModel.id == result_id).first()
    if result is None:
        return _not_found()

    for key, value in updated.model_dump().items():
        setattr(result, key, value)

    db.commit()
    db.refresh(result)
    return {"success": True, "data": BoardExamSchema.model_validate(result).model_dump()}

# ✅ [DELETE] 결과 삭제
@router.delete("/{result_id}")
def delete_board_exam(result_id: int, db: Session = Depends(get_db)):
    result = db.query(BoardExamModel).filter(BoardExamModel.id == result_id).first()
    if result is None:
        return _not_found()

    db.delete(result)
    db.commit()
    return {"success": True, "data": {"result_id": result_id, "message": "Board exam result deleted successfully"}}
