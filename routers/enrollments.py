from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.enrollments import Enrollment as EnrollmentModel
from schemas.enrollments import Enrollment as EnrollmentSchema, EnrollmentCreate

router = APIRouter(prefix="/enrollments", tags=["성적"])


def _not_found():
    return {"success": False, "error": {"code": 404, "message": "Enrollment not found"}}


# ✅ [CREATE] 성적 추가
@router.post("/")
def create_enrollment(enrollment: EnrollmentCreate, db: Session = Depends(get_db)):
    db_enrollment = EnrollmentModel(**enrollment.model_dump())
    db.add(db_enrollment)
    db.commit()
    db.refresh(db_enrollment)
    return {
        "success": True,
        "data": EnrollmentSchema.model_validate(db_enrollment).model_dump(),
        "message": "Enrollment created successfully"
    }

# ✅ [READ] 성적 목록 (교과목별 필터 선택)
@router.get("/")
def read_enrollments(course_id: Optional[int] = None, db: Session = Depends(get_db)):
    query = db.query(EnrollmentModel)
    if course_id is not None:
        query = query.filter(EnrollmentModel.course_id == course_id)
    records = query.order_by(EnrollmentModel.id).all()
    return {"success": True, "data": [EnrollmentSchema.model_validate(r).model_dump() for r in records]}

# ✅ [READ] 특정 성적 조회
@router.get("/{enrollment_id}")
def read_enrollment(enrollment_id: int, db: Session = Depends(get_db)):
    enrollment = db.query(EnrollmentModel).filter(EnrollmentModel.id == enrollment_id).first()
    if enrollment is None:
        return _not_found()
    return {"success": True, "data": EnrollmentSchema.model_validate(enrollment).model_dump()}

# ✅ [UPDATE] 성적 수정
@router.put("/{enrollment_id}")
def update_enrollment(enrollment_id: int, updated: EnrollmentCreate, db: Session = Depends(get_db)):
    enrollment = db.query(EnrollmentModel).filter(EnrollmentModel.id == enrollment_id).first()
    if enrollment is None:
        return _not_found()

    for key, value in updated.model_dump().items():
        setattr(enrollment, key, value)

    db.commit()
    db.refresh(enrollment)
    return {
        "success": True,
        "data": EnrollmentSchema.model_validate(enrollment).model_dump(),
        "message": "Enrollment updated successfully"
    }

# ✅ [DELETE] 성적 삭제
@router.delete("/{enrollment_id}")
def delete_enrollment(enrollment_id: int, db: Session = Depends(get_db)):
    enrollment = db.query(EnrollmentModel).filter(EnrollmentModel.id == enrollment_id).first()
    if enrollment is None:
        return _not_found()

    db.delete(enrollment)
    db.commit()
    return {"success": True, "data": {"enrollment_id": enrollment_id, "message": "Enrollment deleted successfully"}}
