"""
宠物领域实体 - 包含核心业务规则
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from domain.common.exceptions import DomainValidationException


NAME_MAX_LENGTH = 100


@dataclass
class Pet:
    """宠物实体 - 领域核心"""

    id: Optional[int]
    name: str
    species: str
    age: Optional[int] = None
    owner: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """初始化后的业务规则验证"""
        self.validate()

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise DomainValidationException("Pet name must not be empty", field="name")
        if len(self.name) > NAME_MAX_LENGTH:
            raise DomainValidationException(
                f"Pet name must be at most {NAME_MAX_LENGTH} characters", field="name"
            )
        if not self.species or not self.species.strip():
            raise DomainValidationException("Pet species must not be empty", field="species")
        if self.age is not None and self.age < 0:
            raise DomainValidationException("Pet age must not be negative", field="age")

    def update(self, **changes) -> None:
        """业务规则：部分更新，只传入需要修改的字段（None 表示清空）"""
        for key, value in changes.items():
            if hasattr(self, key) and key not in {"id", "created_at"}:
                setattr(self, key, value)
        self.validate()
        self.updated_at = datetime.now(timezone.utc)
