"""
宠物仓储接口 - 定义数据访问的抽象接口
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from .entity import Pet


class PetRepository(ABC):
    """宠物仓储抽象接口 - 只定义能做什么，不管怎么做"""

    @abstractmethod
    async def create(self, pet: Pet) -> Pet:
        """创建宠物"""

    @abstractmethod
    async def get_by_id(self, pet_id: int) -> Optional[Pet]:
        """根据ID获取宠物"""

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100,
                      species: Optional[str] = None) -> List[Pet]:
        """获取宠物列表"""

    @abstractmethod
    async def count(self, species: Optional[str] = None) -> int:
        """统计宠物数量"""

    @abstractmethod
    async def update(self, pet: Pet) -> Pet:
        """更新宠物"""

    @abstractmethod
    async def delete(self, pet_id: int) -> bool:
        """删除宠物"""
