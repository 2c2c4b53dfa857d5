"""
FastAPI应用主入口

- create_app(): 加载配置、挂载全局中间件（CORS、JSON 请求体解析）并把宠物路由挂载到 /pets
- start(): 非测试模式下监听 PORT；NODE_ENV=test 时不绑定端口，测试直接驱动 app
"""
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import JSONBodyMiddleware, LoggingMiddleware, RequestIDMiddleware
from api.routes import pets as pet_routes
from core.config import Settings, settings as default_settings
from core.exceptions import register_exception_handlers
from core.logging_config import configure_logging, get_logger
from core.response import success_response
from core.server import Server, serve
from infrastructure.repositories.pet_repository import InMemoryPetRepository


PETS_PREFIX = "/pets"

# 初始化日志：在入口处显式配置，避免模块导入时的副作用
configure_logging(default_settings)
logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, router: Optional[APIRouter] = None) -> FastAPI:
    """构造完整装配的应用，不绑定任何端口。

    Args:
        settings: 显式注入的配置；缺省使用进程启动时加载的 settings
        router: 挂载到 /pets 的路由；缺省为宠物路由
    """
    settings = settings or default_settings
    router = router or pet_routes.router

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.DEBUG,
    )
    app.state.settings = settings
    app.state.pet_repository = InMemoryPetRepository()

    # 添加中间件（add_middleware 后添加的在外层，先执行）
    # 请求处理顺序：RequestID -> Logging -> CORS -> JSON 请求体解析 -> 路由
    app.add_middleware(JSONBodyMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(router, prefix=PETS_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """健康检查端点"""
        return success_response(data={"status": "healthy"})

    logger.debug("app_initialized", prefix=PETS_PREFIX, environment=settings.NODE_ENV)
    return app


def start(application: Optional[FastAPI] = None, settings: Optional[Settings] = None) -> Optional[Server]:
    """NODE_ENV 不为 test 时绑定 PORT 并开始服务（阻塞直至退出）。"""
    return serve(application if application is not None else app, settings or default_settings)


app = create_app()


if __name__ == "__main__":
    start()
