"""
数据传输对象（DTO）- 应用层与表现层之间的数据传输
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class DTOBase(BaseModel):
    """Base DTO: unify datetime serialization to UTC-Z for all subclasses."""

    @model_serializer(mode="wrap")
    def _serialize_model(self, handler):  # type: ignore[override]
        data = handler(self)

        def convert(value):
            if isinstance(value, datetime):
                ts = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
                return ts.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
            if isinstance(value, list):
                return [convert(v) for v in value]
            if isinstance(value, dict):
                return {k: convert(v) for k, v in value.items()}
            return value

        return convert(data)


class PetCreateDTO(DTOBase):
    """宠物创建DTO"""
    name: str = Field(..., min_length=1, max_length=100, description="宠物名")
    species: str = Field(..., min_length=1, max_length=50, description="物种，如 dog / cat")
    age: Optional[int] = Field(None, ge=0, description="年龄（岁）")
    owner: Optional[str] = Field(None, max_length=100, description="主人")


class PetUpdateDTO(DTOBase):
    """宠物更新DTO（字段均可选）"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    species: Optional[str] = Field(None, min_length=1, max_length=50)
    age: Optional[int] = Field(None, ge=0)
    owner: Optional[str] = Field(None, max_length=100)


class PetResponseDTO(DTOBase):
    """宠物响应DTO"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    species: str
    age: Optional[int] = None
    owner: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
