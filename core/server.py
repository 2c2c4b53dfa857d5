"""
HTTP 服务器封装

在 uvicorn.Server 基础上，监听端口绑定成功后向标准输出打印一行启动提示。
"""
from typing import Optional

import uvicorn

from core.config import Settings
from core.logging_config import get_logger


logger = get_logger(__name__)


def startup_notice(port: int) -> str:
    return f"⚡️[server]: Server is running at https://localhost:{port}"


class Server(uvicorn.Server):
    """监听成功后输出启动提示的 uvicorn 服务器"""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # 绑定失败时 uvicorn 会自行退出进程，这里只处理成功的情况
        if not self.started:
            return
        port = self.bound_port()
        print(startup_notice(port), flush=True)
        logger.info("server_started", host=self.config.host, port=port)

    def bound_port(self) -> int:
        """实际监听的端口（PORT=0 时由系统分配）"""
        for server in getattr(self, "servers", None) or []:
            for sock in server.sockets or []:
                return sock.getsockname()[1]
        return self.config.port


def build_server(app, settings: Settings) -> Server:
    """根据配置构造服务器；PORT 缺省时沿用 uvicorn 的默认端口。"""
    options: dict = {
        "host": settings.HOST,
        "log_config": None,  # 交给 structlog 统一渲染
    }
    if settings.PORT is not None:
        options["port"] = settings.PORT
    return Server(uvicorn.Config(app, **options))


def serve(app, settings: Settings) -> Optional[Server]:
    """绑定端口并阻塞运行；测试模式下直接返回 None。"""
    if settings.is_test:
        logger.debug("server_start_skipped", environment=settings.NODE_ENV)
        return None
    server = build_server(app, settings)
    server.run()
    return server
