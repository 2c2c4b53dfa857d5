"""领域层业务异常定义，供领域与基础设施使用。

核心（core）层仅负责全局映射与异常处理，尽量避免领域层反向依赖核心层。
"""
from __future__ import annotations

from typing import Optional
from shared.codes import BusinessCode


class BusinessException(Exception):
    """业务异常基类"""

    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "BusinessError",
        details: Optional[dict] = None,
        field: Optional[str] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        self.field = field
        super().__init__(self.message)


class PetNotFoundException(BusinessException):
    def __init__(self, pet_id: Optional[int] = None):
        details = {"pet_id": pet_id} if pet_id is not None else None
        super().__init__(
            code=BusinessCode.PET_NOT_FOUND,
            message="Pet not found",
            error_type="PetNotFound",
            details=details,
        )


class DomainValidationException(BusinessException):
    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(
            code=BusinessCode.PARAM_VALIDATION_ERROR,
            message=message,
            error_type="DomainValidationError",
            details=details,
            field=field,
        )


class MalformedJSONException(BusinessException):
    def __init__(self, reason: str):
        super().__init__(
            code=BusinessCode.PARAM_ERROR,
            message="Malformed JSON body",
            error_type="MalformedJSON",
            details={"reason": reason},
        )
