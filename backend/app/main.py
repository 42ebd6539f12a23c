import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.config import settings
from app.database import init_db
from app.logging_config import setup_logging
from app.routers import order_router, ui_router

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)
    # 启动时初始化数据库
    await init_db()
    logger.info("服务器已启动，监听端口 %s", settings.PORT)
    yield

app = FastAPI(
    title="订单收集服务",
    description="地址/联系人订单提交、同日去重、按日期分组分页查询",
    version="1.0.0",
    lifespan=lifespan
)

# CORS 配置，默认允许任何来源
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"code": 400, "message": "参数无效", "detail": jsonable_encoder(exc.errors())},
    )


# 注册路由
app.include_router(order_router)
app.include_router(ui_router)

@app.get("/")
async def root():
    return {"message": "订单收集服务 API", "version": "1.0.0"}

@app.get("/health")
async def health():
    return {"status": "ok"}
