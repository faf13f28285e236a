import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from database.db import Base, engine

# ✅ 로그 설정 (레벨은 .env 의 LOG_LEVEL)
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# 라이브러리 디버그 로그 비활성화
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 임포트
from routers import (
    analytics, board_exams, competencies, courses,
    enrollments, outcomes, programs, surveys,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 라우터 임포트 시점에 모든 모델이 Base.metadata 에 등록됨
    if settings.DB_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        logger.info("DB 테이블 확인/생성 완료")
    yield


app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# ✅ CORS 설정 (프론트엔드 연동)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ 요청 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
app.add_middleware(TimingMiddleware)

# ✅ 전역 에러 핸들러 등록 (일관된 JSON 에러 포맷)
add_error_handlers(app)

# ✅ /v1 프리픽스 라우터 등록
app.include_router(analytics.router,          prefix="/v1")   # ✅ PO 분석 대시보드
app.include_router(programs.router,           prefix="/v1")
app.include_router(outcomes.router,           prefix="/v1")
app.include_router(courses.router,            prefix="/v1")
app.include_router(enrollments.router,        prefix="/v1")
app.include_router(surveys.router,            prefix="/v1")
app.include_router(board_exams.router,        prefix="/v1")
app.include_router(competencies.router,       prefix="/v1")

# ✅ 헬스체크 엔드포인트
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}

# ✅ 루트 엔드포인트
@app.get("/")
def root():
    return {"message": f"{settings.APP_TITLE} - {settings.ENV}"}
