from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from schemas.analytics import AnalyticsResponse
from services.analytics.engine import get_analytics

router = APIRouter(prefix="/analytics", tags=["PO 분석"])


# ✅ [DASHBOARD] PO 달성도 + 추이 + 연도 목록
# - programId: 특정 과정의 PO만 집계 (권한 범위는 호출 측에서 결정)
# - year: 특정 연도만 집계 ("all" 또는 생략 시 전체)
@router.get("", response_model=AnalyticsResponse)
def read_analytics(
    program_id: Optional[int] = Query(None, alias="programId"),
    year: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return get_analytics(db, program_id=program_id, year=year)
