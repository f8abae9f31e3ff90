# winway/catalog/routes.py
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from winway.catalog import services as catalog_service
from winway.catalog.schemas import (
    DeskOptions,
    DressCode,
    Entertainment,
    ServiceOptions,
    StaffMember,
    TodayDressCode,
    WeekDay,
)
from winway.core.config import Settings, get_settings

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("/dress-codes", response_model=list[DressCode])
def dress_codes():
    return catalog_service.get_dress_codes()


@router.get("/dress-codes/today", response_model=TodayDressCode)
def dress_code_today(
    day: date | None = Query(default=None, description="Defaults to today in the venue timezone"),
    settings: Settings = Depends(get_settings),
):
    day = day or datetime.now(settings.tz).date()
    return catalog_service.get_dress_code_for(day)


@router.get("/dress-codes/{key}", response_model=DressCode)
def dress_code(key: str):
    code = catalog_service.get_dress_code(key)
    if not code:
        raise HTTPException(status_code=404, detail="Dress code not found")
    return code


@router.get("/schedule", response_model=list[WeekDay])
def schedule():
    return catalog_service.get_week()


@router.get("/entertainments", response_model=list[Entertainment])
def entertainments(
    type: str | None = Query(default=None, description="slot, live, tournament or all"),
):
    return catalog_service.get_entertainments(type)


@router.get("/entertainments/{entertainment_id}", response_model=Entertainment)
def entertainment(entertainment_id: str):
    item = catalog_service.get_entertainment(entertainment_id)
    if not item:
        raise HTTPException(status_code=404, detail="Entertainment not found")
    return item


@router.get("/staff", response_model=list[StaffMember])
def staff(
    role: str | None = Query(default=None, description="DEALER, SECURITY or all"),
    q: str | None = Query(default=None, description="Case-insensitive name search"),
):
    return catalog_service.get_staff(role, q)


@router.get("/service-options", response_model=ServiceOptions)
def service_options():
    return catalog_service.get_service_options()


@router.get("/desk-options", response_model=DeskOptions)
def desk_options():
    return catalog_service.get_desk_options()
