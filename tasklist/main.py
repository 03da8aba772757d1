import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import tasks
from .config import settings
from .exceptions import TaskNotFoundError, TaskValidationError
from .models.task import seed_tasks
from .services.task_service import TaskService
from .storage.task_store import TaskStore

# 配置日志
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Task List API 启动")
    logger.info(f"📋 当前任务数: {len(app.state.task_service.store)}")
    yield
    logger.info("👋 Task List API 关闭")


async def validation_error_handler(request: Request, exc: TaskValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def not_found_handler(request: Request, exc: TaskNotFoundError):
    logger.info(f"{request.method} {request.url.path} - 任务不存在: {exc.task_id}")
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def malformed_body_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Request body must be valid JSON."})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """创建应用；未传入 store 时按配置决定是否预置示例任务"""
    if store is None:
        store = TaskStore(seed_tasks() if settings.seed_tasks else None)

    app = FastAPI(
        title=settings.app_name,
        description="内存任务列表的增删改查接口",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.task_service = TaskService(store)

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TaskValidationError, validation_error_handler)
    app.add_exception_handler(TaskNotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, malformed_body_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    # 路由注册
    app.include_router(tasks.router)

    @app.get("/", summary="服务信息", tags=["系统"])
    async def root():
        """获取 API 服务信息"""
        return {"message": f"{settings.app_name} is running", "version": settings.version}

    @app.get("/health", summary="健康检查", tags=["系统"])
    async def health():
        """检查服务健康状态"""
        return {"status": "healthy"}

    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run(
        "tasklist.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
