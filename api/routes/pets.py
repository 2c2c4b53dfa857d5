"""
宠物API路由 - FastAPI表现层

由 main.create_app 挂载在 /pets 前缀下，本模块只负责前缀以下的路径与方法分发。
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_pet_service, json_body_as
from application.dto import PetCreateDTO, PetResponseDTO, PetUpdateDTO
from application.services.pet_service import PetApplicationService
from core.response import PaginatedData, Response as ApiResponse, paginated_response, success_response


router = APIRouter(tags=["宠物管理"])


@router.get("", summary="宠物列表", response_model=ApiResponse[PaginatedData[PetResponseDTO]])
async def list_pets(
    species: Optional[str] = Query(None, description="按物种过滤"),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    service: PetApplicationService = Depends(get_pet_service),
):
    pets, total = await service.list_pets(skip=skip, limit=limit, species=species)
    return paginated_response(items=pets, total=total, skip=skip, limit=limit)


@router.post(
    "",
    summary="新增宠物",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[PetResponseDTO],
)
async def create_pet(
    pet_data: PetCreateDTO = Depends(json_body_as(PetCreateDTO)),
    service: PetApplicationService = Depends(get_pet_service),
):
    """
    新增宠物

    - **name**: 名字（1-100个字符）
    - **species**: 物种
    - **age**: 年龄（可选，非负）
    - **owner**: 主人（可选）
    """
    pet = await service.create_pet(pet_data)
    return success_response(data=pet, message="Pet created")


@router.get("/{pet_id}", summary="宠物详情", response_model=ApiResponse[PetResponseDTO])
async def get_pet(pet_id: int, service: PetApplicationService = Depends(get_pet_service)):
    pet = await service.get_pet(pet_id)
    return success_response(data=pet)


@router.put("/{pet_id}", summary="更新宠物", response_model=ApiResponse[PetResponseDTO])
async def update_pet(
    pet_id: int,
    pet_data: PetUpdateDTO = Depends(json_body_as(PetUpdateDTO)),
    service: PetApplicationService = Depends(get_pet_service),
):
    """只更新请求体中出现的字段"""
    pet = await service.update_pet(pet_id, pet_data)
    return success_response(data=pet, message="Pet updated")


@router.delete("/{pet_id}", summary="删除宠物", response_model=ApiResponse)
async def delete_pet(pet_id: int, service: PetApplicationService = Depends(get_pet_service)):
    await service.delete_pet(pet_id)
    return success_response(message="Pet deleted")
