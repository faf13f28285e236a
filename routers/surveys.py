import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.courses import Course as CourseModel
from models.surveys import (
    Survey as SurveyModel,
    SurveyAnswer as SurveyAnswerModel,
    SurveyCourseLink as SurveyCourseLinkModel,
    SurveyQuestion as SurveyQuestionModel,
    SurveyResponse as SurveyResponseModel,
)
from schemas.surveys import (
    Survey as SurveySchema,
    SurveyAnswer as SurveyAnswerSchema,
    SurveyCreate,
    SurveyQuestion as SurveyQuestionSchema,
    SurveyQuestionCreate,
    SurveyResponse as SurveyResponseSchema,
    SurveyResponseCreate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/surveys", tags=["설문"])


def _not_found(message: str = "Survey not found"):
    return {"success": False, "error": {"code": 404, "message": message}}


def _get_survey(db: Session, survey_id: int):
    return db.query(SurveyModel).filter(SurveyModel.id == survey_id).first()


def _missing_courses(db: Session, course_ids: List[int]) -> List[int]:
    if not course_ids:
        return []
    found = {c.id for c in db.query(CourseModel.id).filter(CourseModel.id.in_(course_ids)).all()}
    return [c for c in course_ids if c not in found]


def _replace_children(db: Session, survey_id: int, payload: SurveyCreate):
    # 문항 교체 시 기존 답변은 남지만 더 이상 어떤 문항에도 연결되지 않음
    if payload.questions is not None:
        db.query(SurveyQuestionModel).filter(SurveyQuestionModel.survey_id == survey_id).delete()
        db.add_all([SurveyQuestionModel(survey_id=survey_id, **q.model_dump()) for q in payload.questions])
    if payload.course_ids is not None:
        db.query(SurveyCourseLinkModel).filter(SurveyCourseLinkModel.survey_id == survey_id).delete()
        db.add_all([
            SurveyCourseLinkModel(survey_id=survey_id, course_id=course_id)
            for course_id in dict.fromkeys(payload.course_ids)
        ])


def _survey_data(db: Session, survey: SurveyModel) -> dict:
    questions = (
        db.query(SurveyQuestionModel)
        .filter(SurveyQuestionModel.survey_id == survey.id)
        .order_by(SurveyQuestionModel.id)
        .all()
    )
    links = (
        db.query(SurveyCourseLinkModel)
        .filter(SurveyCourseLinkModel.survey_id == survey.id)
        .order_by(SurveyCourseLinkModel.id)
        .all()
    )
    data = SurveySchema.model_validate(survey).model_dump()
    data["questions"] = [SurveyQuestionSchema.model_validate(q).model_dump() for q in questions]
    data["course_ids"] = [link.course_id for link in links]
    return data


# ==========================================================
# [1단계] 설문 CRUD (문항 / 교과목 연결 동시 관리)
# ==========================================================

# ✅ [CREATE] 설문 생성
@router.post("/")
def create_survey(survey: SurveyCreate, db: Session = Depends(get_db)):
    missing = _missing_courses(db, survey.course_ids or [])
    if missing:
        return _not_found(f"Courses not found: {missing}")

    db_survey = SurveyModel(**survey.model_dump(exclude={"questions", "course_ids"}))
    db.add(db_survey)
    db.flush()   # survey.id 확보
    _replace_children(db, db_survey.id, survey)
    db.commit()
    db.refresh(db_survey)
    return {
        "success": True,
        "data": _survey_data(db, db_survey),
        "message": "Survey created successfully"
    }

# ✅ [READ] 전체 설문 조회
@router.get("/")
def read_surveys(db: Session = Depends(get_db)):
    records = db.query(SurveyModel).order_by(SurveyModel.id).all()
    return {"success": True, "data": [SurveySchema.model_validate(r).model_dump() for r in records]}

# ✅ [READ] 특정 설문 + 문항 + 연결 교과목 조회
@router.get("/{survey_id}")
def read_survey(survey_id: int, db: Session = Depends(get_db)):
    survey = _get_survey(db, survey_id)
    if survey is None:
        return _not_found()
    return {"success": True, "data": _survey_data(db, survey)}

# ✅ [UPDATE] 설문 수정 (questions / course_ids 가 주어지면 전체 교체, 응답은 유지)
@router.put("/{survey_id}")
def update_survey(survey_id: int, updated: SurveyCreate, db: Session = Depends(get_db)):
    survey = _get_survey(db, survey_id)
    if survey is None:
        return _not_found()
    missing = _missing_courses(db, updated.course_ids or [])
    if missing:
        return _not_found(f"Courses not found: {missing}")

    for key, value in updated.model_dump(exclude={"questions", "course_ids"}).items():
        setattr(survey, key, value)
    _replace_children(db, survey_id, updated)

    db.commit()
    db.refresh(survey)
    return {
        "success": True,
        "data": _survey_data(db, survey),
        "message": "Survey updated successfully"
    }

# ✅ [DELETE] 설문 삭제 (문항/연결/응답/답변 함께 삭제)
@router.delete("/{survey_id}")
def delete_survey(survey_id: int, db: Session = Depends(get_db)):
    survey = _get_survey(db, survey_id)
    if survey is None:
        return _not_found()

    response_ids = [
        r.id for r in db.query(SurveyResponseModel.id).filter(SurveyResponseModel.survey_id == survey_id).all()
    ]
    if response_ids:
        db.query(SurveyAnswerModel).filter(SurveyAnswerModel.response_id.in_(response_ids)).delete(
            synchronize_session=False
        )
    db.query(SurveyResponseModel).filter(SurveyResponseModel.survey_id == survey_id).delete()
    db.query(SurveyQuestionModel).filter(SurveyQuestionModel.survey_id == survey_id).delete()
    db.query(SurveyCourseLinkModel).filter(SurveyCourseLinkModel.survey_id == survey_id).delete()
    db.delete(survey)
    db.commit()
    return {"success": True, "data": {"survey_id": survey_id, "message": "Survey deleted successfully"}}

# ==========================================================
# [2단계] 문항
# ==========================================================

@router.post("/{survey_id}/questions")
def create_question(survey_id: int, question: SurveyQuestionCreate, db: Session = Depends(get_db)):
    if _get_survey(db, survey_id) is None:
        return _not_found()

    db_question = SurveyQuestionModel(survey_id=survey_id, **question.model_dump())
    db.add(db_question)
    db.commit()
    db.refresh(db_question)
    return {"success": True, "data": SurveyQuestionSchema.model_validate(db_question).model_dump()}

@router.get("/{survey_id}/questions")
def read_questions(survey_id: int, db: Session = Depends(get_db)):
    records = (
        db.query(SurveyQuestionModel)
        .filter(SurveyQuestionModel.survey_id == survey_id)
        .order_by(SurveyQuestionModel.id)
        .all()
    )
    return {"success": True, "data": [SurveyQuestionSchema.model_validate(r).model_dump() for r in records]}

# ==========================================================
# [3단계] 응답 제출 / 조회
# ==========================================================

# ✅ [SUBMIT] 응답 1건 + 답변들을 한 트랜잭션으로 저장
@router.post("/{survey_id}/responses")
def submit_response(survey_id: int, payload: SurveyResponseCreate, db: Session = Depends(get_db)):
    survey = _get_survey(db, survey_id)
    if survey is None:
        return _not_found()
    if not survey.is_active:
        return {"success": False, "error": {"code": 400, "message": "Survey is not accepting responses"}}

    question_ids = {
        q.id for q in db.query(SurveyQuestionModel.id).filter(SurveyQuestionModel.survey_id == survey_id).all()
    }
    unknown = [a.question_id for a in payload.answers if a.question_id not in question_ids]
    if unknown:
        return _not_found(f"Questions not in survey: {unknown}")

    response_fields = payload.model_dump(exclude={"answers"}, exclude_none=True)
    db_response = SurveyResponseModel(survey_id=survey_id, **response_fields)
    db.add(db_response)
    db.flush()   # response.id 확보

    db_answers = [SurveyAnswerModel(response_id=db_response.id, **a.model_dump()) for a in payload.answers]
    db.add_all(db_answers)
    db.commit()
    db.refresh(db_response)
    logger.info(f"설문 응답 저장: survey_id={survey_id}, response_id={db_response.id}, answers={len(db_answers)}")

    data = SurveyResponseSchema.model_validate(db_response).model_dump()
    data["answers"] = [SurveyAnswerSchema.model_validate(a).model_dump() for a in db_answers]
    return {"success": True, "data": data, "message": "Survey response submitted successfully"}

@router.get("/{survey_id}/responses")
def read_responses(survey_id: int, db: Session = Depends(get_db)):
    records = (
        db.query(SurveyResponseModel)
        .filter(SurveyResponseModel.survey_id == survey_id)
        .order_by(SurveyResponseModel.id)
        .all()
    )
    return {"success": True, "data": [SurveyResponseSchema.model_validate(r).model_dump() for r in records]}
