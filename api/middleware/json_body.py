"""
JSON 请求体解析中间件

在请求到达任何路由之前，把 JSON 请求体解析为结构化对象，
存入 request.state.json_body；非 JSON 或空请求体时为 None。
"""
import json
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from core.exceptions import business_exception_response
from core.logging_config import get_logger
from domain.common.exceptions import MalformedJSONException


logger = get_logger(__name__)


def is_json_content_type(content_type: str) -> bool:
    """application/json 以及 application/*+json 均视为 JSON。"""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


class JSONBodyMiddleware(BaseHTTPMiddleware):
    """解析 JSON 请求体；格式错误时直接返回 400，不进入路由。"""

    async def dispatch(self, request: Request, call_next):
        request.state.json_body = None

        if is_json_content_type(request.headers.get("content-type", "")):
            body = await request.body()
            if body:
                try:
                    request.state.json_body = self._parse(body)
                except (ValueError, RecursionError) as exc:
                    # 嵌套过深同样视为格式错误
                    logger.warning("json_body_malformed", error=str(exc))
                    return business_exception_response(request, MalformedJSONException(str(exc)))

        return await call_next(request)

    @staticmethod
    def _parse(body: bytes) -> Any:
        return json.loads(body.decode("utf-8"))
