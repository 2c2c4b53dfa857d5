"""
宠物应用服务（application/services）- 编排领域对象和处理应用逻辑
"""
from typing import List, Optional, Tuple

from application.dto import PetCreateDTO, PetResponseDTO, PetUpdateDTO
from core.logging_config import get_logger
from domain.common.exceptions import PetNotFoundException
from domain.pet.entity import Pet
from domain.pet.repository import PetRepository


logger = get_logger(__name__)


class PetApplicationService:
    """宠物应用服务 - 处理应用层逻辑"""

    def __init__(self, repository: PetRepository):
        self._repository = repository

    async def create_pet(self, data: PetCreateDTO) -> PetResponseDTO:
        pet = Pet(id=None, **data.model_dump())
        created = await self._repository.create(pet)
        logger.info("pet_registered", pet_id=created.id, species=created.species)
        return PetResponseDTO.model_validate(created)

    async def get_pet(self, pet_id: int) -> PetResponseDTO:
        pet = await self._repository.get_by_id(pet_id)
        if pet is None:
            raise PetNotFoundException(pet_id)
        return PetResponseDTO.model_validate(pet)

    async def list_pets(
        self, skip: int = 0, limit: int = 20, species: Optional[str] = None
    ) -> Tuple[List[PetResponseDTO], int]:
        pets = await self._repository.get_all(skip=skip, limit=limit, species=species)
        total = await self._repository.count(species=species)
        return [PetResponseDTO.model_validate(p) for p in pets], total

    async def update_pet(self, pet_id: int, data: PetUpdateDTO) -> PetResponseDTO:
        pet = await self._repository.get_by_id(pet_id)
        if pet is None:
            raise PetNotFoundException(pet_id)
        pet.update(**data.model_dump(exclude_unset=True))
        updated = await self._repository.update(pet)
        return PetResponseDTO.model_validate(updated)

    async def delete_pet(self, pet_id: int) -> None:
        if not await self._repository.delete(pet_id):
            raise PetNotFoundException(pet_id)
        logger.info("pet_removed", pet_id=pet_id)
