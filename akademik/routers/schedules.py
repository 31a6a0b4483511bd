# akademik/routers/schedules.py
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.schedule_schemas import (
    Schedule, ScheduleCreate, ScheduleTemplate, ScheduleTemplateCreate, ScheduleTemplateUpdate,
    ScheduleUpdate, TimeSlot, TimeSlotCreate, TimeSlotUpdate,
)
from ..services.schedule_service import ScheduleService, ScheduleTemplateService, TimeSlotService

router = APIRouter(prefix="/api/v1/schedules", tags=["Schedules"])

# ---------- Templates ----------

@router.post("/templates", response_model=ScheduleTemplate, status_code=status.HTTP_201_CREATED)
async def create_schedule_template(template: ScheduleTemplateCreate, db: AsyncSession = Depends(get_db)):
    service = ScheduleTemplateService(db)
    return await service.create(template.model_dump())

@router.get("/templates", response_model=List[ScheduleTemplate])
async def get_schedule_templates(db: AsyncSession = Depends(get_db)):
    service = ScheduleTemplateService(db)
    return await service.get_multi()

@router.get("/templates/{template_id}", response_model=ScheduleTemplate)
async def get_schedule_template(template_id: int, db: AsyncSession = Depends(get_db)):
    service = ScheduleTemplateService(db)
    template = await service.get(template_id)
    if not template:
        raise HTTPException(status_code=404, detail=f"Schedule template with id {template_id} not found")
    return template

@router.put("/templates/{template_id}", response_model=ScheduleTemplate)
async def update_schedule_template(
    template_id: int,
    template: ScheduleTemplateUpdate,
    db: AsyncSession = Depends(get_db)
):
    service = ScheduleTemplateService(db)
    return await service.update_template(template_id, template.model_dump(exclude_unset=True))

@router.delete("/templates/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule_template(template_id: int, db: AsyncSession = Depends(get_db)):
    service = ScheduleTemplateService(db)
    if not await service.delete(template_id):
        raise HTTPException(status_code=404, detail=f"Schedule template with id {template_id} not found")

# ---------- Time slots ----------

@router.post("/time-slots", response_model=TimeSlot, status_code=status.HTTP_201_CREATED)
async def create_time_slot(time_slot: TimeSlotCreate, db: AsyncSession = Depends(get_db)):
    service = TimeSlotService(db)
    return await service.create_time_slot(time_slot)

@router.get("/templates/{template_id}/time-slots", response_model=List[TimeSlot])
async def get_time_slots_by_template(
    template_id: int,
    day_of_week: Optional[int] = Query(None, ge=1, le=5),
    db: AsyncSession = Depends(get_db)
):
    service = TimeSlotService(db)
    return await service.get_by_template(template_id, day_of_week)

@router.delete("/templates/{template_id}/time-slots", status_code=status.HTTP_204_NO_CONTENT)
async def delete_time_slots_by_template(template_id: int, db: AsyncSession = Depends(get_db)):
    service = TimeSlotService(db)
    if not await service.delete_by_template(template_id):
        raise HTTPException(status_code=404, detail=f"No time slots for schedule template {template_id}")

@router.get("/time-slots/{time_slot_id}", response_model=TimeSlot)
async def get_time_slot(time_slot_id: int, db: AsyncSession = Depends(get_db)):
    service = TimeSlotService(db)
    time_slot = await service.get(time_slot_id)
    if not time_slot:
        raise HTTPException(status_code=404, detail=f"Time slot with id {time_slot_id} not found")
    return time_slot

@router.put("/time-slots/{time_slot_id}", response_model=TimeSlot)
async def update_time_slot(time_slot_id: int, time_slot: TimeSlotUpdate, db: AsyncSession = Depends(get_db)):
    service = TimeSlotService(db)
    return await service.update_time_slot(time_slot_id, time_slot.model_dump(exclude_unset=True))

@router.delete("/time-slots/{time_slot_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_time_slot(time_slot_id: int, db: AsyncSession = Depends(get_db)):
    service = TimeSlotService(db)
    if not await service.delete(time_slot_id):
        raise HTTPException(status_code=404, detail=f"Time slot with id {time_slot_id} not found")

# ---------- Schedule entries ----------

@router.post("/", response_model=Schedule, status_code=status.HTTP_201_CREATED)
async def create_schedule(schedule: ScheduleCreate, db: AsyncSession = Depends(get_db)):
    """Store a manual entry. No conflict checks are made."""
    service = ScheduleService(db)
    return await service.create_schedule(schedule)

@router.get("/academic-year/{academic_year_id}/class/{class_id}", response_model=List[Schedule])
async def get_schedules_by_class(academic_year_id: int, class_id: int, db: AsyncSession = Depends(get_db)):
    service = ScheduleService(db)
    return await service.get_by_class(class_id, academic_year_id)

@router.get("/academic-year/{academic_year_id}/teacher/{teacher_id}", response_model=List[Schedule])
async def get_schedules_by_teacher(academic_year_id: int, teacher_id: int, db: AsyncSession = Depends(get_db)):
    service = ScheduleService(db)
    return await service.get_by_teacher(teacher_id, academic_year_id)

@router.get("/{schedule_id}", response_model=Schedule)
async def get_schedule(schedule_id: int, db: AsyncSession = Depends(get_db)):
    service = ScheduleService(db)
    schedule = await service.get(schedule_id)
    if not schedule:
        raise HTTPException(status_code=404, detail=f"Schedule with id {schedule_id} not found")
    return schedule

@router.put("/{schedule_id}", response_model=Schedule)
async def update_schedule(schedule_id: int, schedule: ScheduleUpdate, db: AsyncSession = Depends(get_db)):
    service = ScheduleService(db)
    return await service.update_schedule(schedule_id, schedule.model_dump(exclude_unset=True))

@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule(schedule_id: int, db: AsyncSession = Depends(get_db)):
    service = ScheduleService(db)
    if not await service.delete(schedule_id):
        raise HTTPException(status_code=404, detail=f"Schedule with id {schedule_id} not found")
