"""
宠物仓储实现 - 进程内内存存储

数据随进程结束而丢失；仅在事件循环线程内访问，写操作用 asyncio.Lock 串行化。
"""
import asyncio
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

from domain.pet.entity import Pet
from domain.pet.repository import PetRepository
from domain.common.exceptions import PetNotFoundException
from core.logging_config import get_logger


logger = get_logger(__name__)


class InMemoryPetRepository(PetRepository):
    """宠物仓储的内存实现"""

    def __init__(self):
        self._items: Dict[int, Pet] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create(self, pet: Pet) -> Pet:
        async with self._lock:
            now = datetime.now(timezone.utc)
            stored = replace(pet, id=self._next_id, created_at=now, updated_at=now)
            self._items[stored.id] = stored
            self._next_id += 1
        logger.debug("pet_created", pet_id=stored.id)
        return replace(stored)

    async def get_by_id(self, pet_id: int) -> Optional[Pet]:
        pet = self._items.get(pet_id)
        return replace(pet) if pet else None

    def _filter(self, species: Optional[str]) -> List[Pet]:
        pets = sorted(self._items.values(), key=lambda p: p.id)
        if species:
            wanted = species.lower()
            pets = [p for p in pets if p.species.lower() == wanted]
        return pets

    async def get_all(self, skip: int = 0, limit: int = 100,
                      species: Optional[str] = None) -> List[Pet]:
        return [replace(p) for p in self._filter(species)[skip:skip + limit]]

    async def count(self, species: Optional[str] = None) -> int:
        return len(self._filter(species))

    async def update(self, pet: Pet) -> Pet:
        async with self._lock:
            if pet.id not in self._items:
                raise PetNotFoundException(pet.id)
            self._items[pet.id] = replace(pet)
        return replace(pet)

    async def delete(self, pet_id: int) -> bool:
        async with self._lock:
            return self._items.pop(pet_id, None) is not None
