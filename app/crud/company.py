"""
CRUD operations for Company model.
"""

from typing import List
from sqlalchemy.orm import Session, selectinload
from app.core.exceptions import BadRequestError, NotFoundError
from app.models.company import Company
from app.schemas.company import CompanyNew


def create(db: Session, company_data: CompanyNew) -> Company:
    """
    Create a company.

    Raises:
        BadRequestError: If the handle or name is already taken
    """
    if db.get(Company, company_data.handle) is not None:
        raise BadRequestError(f"Duplicate company: {company_data.handle}")
    if db.query(Company).filter(Company.name == company_data.name).first():
        raise BadRequestError(f"Duplicate company name: {company_data.name}")

    company = Company(**company_data.model_dump())
    db.add(company)
    db.commit()
    db.refresh(company)

    return company


def get_multi(db: Session) -> List[Company]:
    """All companies, ordered by name."""
    return db.query(Company).order_by(Company.name).all()


def get(db: Session, handle: str) -> Company:
    """
    Retrieve a company with its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    company = (
        db.query(Company)
        .options(selectinload(Company.jobs))
        .filter(Company.handle == handle)
        .first()
    )
    if not company:
        raise NotFoundError(f"No company: {handle}")
    return company
