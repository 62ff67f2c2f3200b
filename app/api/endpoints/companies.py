import logging
from typing import Any
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin
from app.core.validation import validate_payload
from app.crud import company as company_crud
from app.schemas.company import (
    CompanyDetail,
    CompanyDetailEnvelope,
    CompanyEnvelope,
    CompanyListEnvelope,
    CompanyNew,
    CompanyResponse,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post(
    "",
    status_code=201,
    response_model=CompanyEnvelope,
    dependencies=[Depends(ensure_admin)]
)
def create_company(payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Create a company. Body: { handle, name, description?, numEmployees?, logoUrl? }

    Authorization required: admin
    """
    company_data = validate_payload(CompanyNew, payload)
    company = company_crud.create(db, company_data)

    logger.info(f"Created company {company.handle}")
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.get("", response_model=CompanyListEnvelope)
def list_companies(db: Session = Depends(get_db)):
    """List all companies ordered by name."""
    companies = company_crud.get_multi(db)
    return CompanyListEnvelope(companies=[CompanyResponse.model_validate(c) for c in companies])


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company and the jobs it has posted."""
    company = company_crud.get(db, handle)
    return CompanyDetailEnvelope(company=CompanyDetail.model_validate(company))
