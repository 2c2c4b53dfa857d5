"""
API依赖项
"""
from typing import Any, Callable, Type, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from application.services.pet_service import PetApplicationService
from domain.pet.repository import PetRepository


ModelT = TypeVar("ModelT", bound=BaseModel)


def get_pet_repository(request: Request) -> PetRepository:
    """每个应用实例持有一个仓储（见 main.create_app）"""
    return request.app.state.pet_repository


async def get_pet_service(
    repository: PetRepository = Depends(get_pet_repository),
) -> PetApplicationService:
    return PetApplicationService(repository)


async def get_json_body(request: Request) -> Any:
    """JSONBodyMiddleware 解析后的请求体；非 JSON 请求为 None"""
    return getattr(request.state, "json_body", None)


def json_body_as(model: Type[ModelT]) -> Callable[..., ModelT]:
    """把中间件解析好的请求体校验为 DTO；校验失败按请求参数错误（422）处理。

    无请求体时按空对象校验，与 JSON 解析中间件的默认行为一致。
    """

    async def _dependency(payload: Any = Depends(get_json_body)) -> ModelT:
        try:
            return model.model_validate({} if payload is None else payload)
        except ValidationError as exc:
            errors = [
                {**error, "loc": ("body", *error["loc"])}
                for error in exc.errors(include_url=False)
            ]
            raise RequestValidationError(errors, body=payload) from exc

    return _dependency
