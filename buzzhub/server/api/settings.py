"""
API endpoints for site settings.

Settings are string key/value pairs grouped by category; boolean settings
hold ``"true"`` or ``"false"``.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response, status

from buzzhub.core.database.entities import Setting
from buzzhub.core.logging_config import get_logger
from buzzhub.core.models.io import SettingCreate, SettingRead, SettingValueUpdate
from buzzhub.server.services.deps import StorageDep

logger = get_logger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])

DEFAULT_SETTING_CATEGORY = "general"


@router.get("", response_model=List[SettingRead], summary="List Settings")
async def list_settings(storage: StorageDep, category: Optional[str] = None) -> List[SettingRead]:
    return [SettingRead.model_validate(setting) for setting in await storage.get_settings(category)]


@router.get(
    "/{key}",
    response_model=SettingRead,
    summary="Get Setting",
    responses={404: {"description": "Setting not found"}},
)
async def get_setting(key: str, storage: StorageDep) -> SettingRead:
    setting = await storage.get_setting(key)
    if setting is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Setting '{key}' not found")
    return SettingRead.model_validate(setting)


@router.post(
    "",
    response_model=SettingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Setting",
    responses={409: {"description": "Setting key already exists"}},
)
async def create_setting(data: SettingCreate, storage: StorageDep) -> SettingRead:
    if await storage.get_setting(data.key) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Setting '{data.key}' already exists")
    return SettingRead.model_validate(await storage.create_setting(Setting(**data.model_dump())))


@router.put(
    "/{key}",
    response_model=SettingRead,
    summary="Set Setting Value",
    description="Set the value of a setting, creating it in the 'general' category when missing.",
    responses={
        200: {"description": "Existing setting updated"},
        201: {"description": "Setting created"},
    },
)
async def put_setting(key: str, data: SettingValueUpdate, response: Response, storage: StorageDep) -> SettingRead:
    """
    Upsert a setting value.

    Answers 200 when an existing setting was updated and 201 when it had to
    be created.
    """
    setting = await storage.update_setting(key, data.value)
    if setting is None:
        setting = await storage.create_setting(Setting(key=key, value=data.value, category=DEFAULT_SETTING_CATEGORY))
        response.status_code = status.HTTP_201_CREATED
        logger.info(f"Created setting '{key}'")
    return SettingRead.model_validate(setting)
