"""/api/v1/admin - departments, designations and bidding templates"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import (
    MessageResponse,
    NamedItemCreate,
    NamedItemResponse,
    TemplateCreate,
    TemplateResponse,
    TemplateUpdate,
)
from tender_crm.infrastructure.database.session import get_db
from tender_crm.services.admin import TemplateService, department_service, designation_service

router = APIRouter()


# Departments

@router.get("/departments", response_model=List[NamedItemResponse])
def list_departments(db: Session = Depends(get_db)):
    return [NamedItemResponse.model_validate(d) for d in department_service(db).list()]


@router.post("/departments", response_model=NamedItemResponse, status_code=201)
def add_department(request_body: NamedItemCreate, db: Session = Depends(get_db)):
    return NamedItemResponse.model_validate(department_service(db).add(request_body.name))


@router.delete("/departments/{department_id}", response_model=MessageResponse)
def delete_department(department_id: str, db: Session = Depends(get_db)):
    department_service(db).delete(department_id)
    return MessageResponse(message="Department deleted")


# Designations

@router.get("/designations", response_model=List[NamedItemResponse])
def list_designations(db: Session = Depends(get_db)):
    return [NamedItemResponse.model_validate(d) for d in designation_service(db).list()]


@router.post("/designations", response_model=NamedItemResponse, status_code=201)
def add_designation(request_body: NamedItemCreate, db: Session = Depends(get_db)):
    return NamedItemResponse.model_validate(designation_service(db).add(request_body.name))


@router.delete("/designations/{designation_id}", response_model=MessageResponse)
def delete_designation(designation_id: str, db: Session = Depends(get_db)):
    designation_service(db).delete(designation_id)
    return MessageResponse(message="Designation deleted")


# Bidding templates

@router.get("/templates", response_model=List[TemplateResponse])
def list_templates(db: Session = Depends(get_db)):
    return [TemplateResponse.model_validate(t) for t in TemplateService(db).list()]


@router.post("/templates", response_model=TemplateResponse, status_code=201)
def add_template(request_body: TemplateCreate, db: Session = Depends(get_db)):
    return TemplateResponse.model_validate(TemplateService(db).create(request_body))


@router.put("/templates/{template_id}", response_model=TemplateResponse)
def update_template(template_id: str, request_body: TemplateUpdate, db: Session = Depends(get_db)):
    return TemplateResponse.model_validate(TemplateService(db).update(template_id, request_body))


@router.delete("/templates/{template_id}", response_model=MessageResponse)
def delete_template(template_id: str, db: Session = Depends(get_db)):
    TemplateService(db).delete(template_id)
    return MessageResponse(message="Template deleted")
