from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database.db import get_db
from models.courses import Course as CourseModel, CoursePoMapping as CoursePoMappingModel
from models.outcomes import ProgramOutcome as OutcomeModel
from models.surveys import SurveyCourseLink as SurveyCourseLinkModel
from schemas.courses import (
    Course as CourseSchema,
    CourseCreate,
    CoursePoMapping as CoursePoMappingSchema,
    CoursePoMappingCreate,
    CoursePoMappingReplace,
)

router = APIRouter(prefix="/courses", tags=["교과목"])


def _not_found(message: str = "Course not found"):
    return {"success": False, "error": {"code": 404, "message": message}}


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 교과목 추가
@router.post("/")
def create_course(course: CourseCreate, db: Session = Depends(get_db)):
    db_course = CourseModel(**course.model_dump())
    db.add(db_course)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=f"Course code already exists: {course.code}")
    db.refresh(db_course)
    return {
        "success": True,
        "data": CourseSchema.model_validate(db_course).model_dump(),
        "message": "Course created successfully"
    }

# ✅ [READ] 전체 교과목 조회
@router.get("/")
def read_courses(db: Session = Depends(get_db)):
    records = db.query(CourseModel).order_by(CourseModel.id).all()
    return {"success": True, "data": [CourseSchema.model_validate(r).model_dump() for r in records]}

# ✅ [READ] 특정 교과목 조회
@router.get("/{course_id}")
def read_course(course_id: int, db: Session = Depends(get_db)):
    course = db.query(CourseModel).filter(CourseModel.id == course_id).first()
    if course is None:
        return _not_found()
    return {"success": True, "data": CourseSchema.model_validate(course).model_dump()}

# ✅ [UPDATE] 교과목 수정
@router.put("/{course_id}")
def update_course(course_id: int, updated: CourseCreate, db: Session = Depends(get_db)):
    course = db.query(CourseModel).filter(CourseModel.id == course_id).first()
    if course is None:
        return _not_found()

    for key, value in updated.model_dump().items():
        setattr(course, key, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=f"Course code already exists: {updated.code}")
    db.refresh(course)
    return {"success": True, "data": CourseSchema.model_validate(course).model_dump()}

# ✅ [DELETE] 교과목 삭제
@router.delete("/{course_id}")
def delete_course(course_id: int, db: Session = Depends(get_db)):
    course = db.query(CourseModel).filter(CourseModel.id == course_id).first()
    if course is None:
        return _not_found()

    db.query(SurveyCourseLinkModel).filter(SurveyCourseLinkModel.course_id == course_id).delete()
    db.query(CoursePoMappingModel).filter(CoursePoMappingModel.course_id == course_id).delete()
    db.delete(course)
    db.commit()
    return {"success": True, "data": {"course_id": course_id, "message": "Course deleted successfully"}}

# ==========================================================
# [2단계] 교과목 ↔ PO 매핑
# ==========================================================

@router.post("/{course_id}/outcomes")
def link_course_outcome(course_id: int, mapping: CoursePoMappingCreate, db: Session = Depends(get_db)):
    if db.query(CourseModel).filter(CourseModel.id == course_id).first() is None:
        return _not_found()
    if db.query(OutcomeModel).filter(OutcomeModel.id == mapping.po_id).first() is None:
        return _not_found("Program outcome not found")

    db_mapping = CoursePoMappingModel(course_id=course_id, **mapping.model_dump())
    db.add(db_mapping)
    db.commit()
    db.refresh(db_mapping)
    return {"success": True, "data": CoursePoMappingSchema.model_validate(db_mapping).model_dump()}

@router.get("/{course_id}/outcomes")
def read_course_outcome_links(course_id: int, db: Session = Depends(get_db)):
    records = db.query(CoursePoMappingModel).filter(CoursePoMappingModel.course_id == course_id).all()
    return {"success": True, "data": [CoursePoMappingSchema.model_validate(r).model_dump() for r in records]}

# ✅ [REPLACE] 매핑 전체 교체 (기존 매핑 삭제 후 재등록)
@router.put("/{course_id}/outcomes")
def replace_course_outcomes(course_id: int, payload: CoursePoMappingReplace, db: Session = Depends(get_db)):
    if db.query(CourseModel).filter(CourseModel.id == course_id).first() is None:
        return _not_found()

    po_ids = list(dict.fromkeys(payload.po_ids))
    found = {o.id for o in db.query(OutcomeModel.id).filter(OutcomeModel.id.in_(po_ids)).all()} if po_ids else set()
    missing = [p for p in po_ids if p not in found]
    if missing:
        return _not_found(f"Program outcomes not found: {missing}")

    db.query(CoursePoMappingModel).filter(CoursePoMappingModel.course_id == course_id).delete()
    db.add_all([CoursePoMappingModel(course_id=course_id, po_id=po_id) for po_id in po_ids])
    db.commit()
    return {"success": True, "data": {"course_id": course_id, "po_ids": po_ids}, "message": "Mappings replaced successfully"}

@router.delete("/{course_id}/outcomes/{po_id}")
def unlink_course_outcome(course_id: int, po_id: int, db: Session = Depends(get_db)):
    deleted = (
        db.query(CoursePoMappingModel)
        .filter(CoursePoMappingModel.course_id == course_id, CoursePoMappingModel.po_id == po_id)
        .delete()
    )
    if not deleted:
        return _not_found("Course-outcome mapping not found")
    db.commit()
    return {"success": True, "data": {"course_id": course_id, "po_id": po_id, "message": "Mapping deleted successfully"}}
