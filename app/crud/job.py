"""
CRUD operations for Job model.

Encapsulates all database operations for jobs. Lookups that miss raise
NotFoundError so the API layer can pass failures straight through.
"""

from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from app.core.exceptions import BadRequestError, NotFoundError
from app.models.company import Company
from app.models.job import Job
from app.schemas.job import JobNew, JobUpdate


def _to_decimal(value: Optional[str]) -> Optional[Decimal]:
    return Decimal(value) if value is not None else None


def create(db: Session, job_data: JobNew) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id

    Raises:
        BadRequestError: If the company handle does not exist
    """
    if db.get(Company, job_data.company_handle) is None:
        raise BadRequestError(f"No company: {job_data.company_handle}")

    db_job = Job(
        title=job_data.title,
        salary=job_data.salary,
        equity=_to_decimal(job_data.equity),
        company_handle=job_data.company_handle,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_multi(
    db: Session,
    min_salary: Optional[int] = None,
    has_equity: bool = False,
    title: Optional[str] = None
) -> List[Job]:
    """
    Retrieve jobs matching the optional filters, ordered by title.

    Args:
        db: Database session
        min_salary: Only jobs paying at least this much
        has_equity: Only jobs offering non-zero equity
        title: Case-insensitive substring of the title

    Returns:
        List of Job instances with their company loaded
    """
    query = db.query(Job).options(joinedload(Job.company))

    if min_salary is not None:
        query = query.filter(Job.salary >= min_salary)
    if has_equity:
        query = query.filter(Job.equity > 0)
    if title:
        query = query.filter(Job.title.ilike(f"%{title}%"))

    return query.order_by(Job.title, Job.id).all()


def get(db: Session, job_id: int) -> Job:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no job has this id
    """
    job = (
        db.query(Job)
        .options(joinedload(Job.company))
        .filter(Job.id == job_id)
        .first()
    )
    if not job:
        raise NotFoundError(f"No job: {job_id}")
    return job


def update(db: Session, job_id: int, job_data: JobUpdate) -> Job:
    """
    Apply a partial update; only fields present in the request change.

    Raises:
        BadRequestError: If the update carries no fields
        NotFoundError: If no job has this id
    """
    changes = job_data.model_dump(exclude_unset=True)
    if not changes:
        raise BadRequestError("No data")

    job = get(db, job_id)
    if "equity" in changes:
        changes["equity"] = _to_decimal(changes["equity"])
    for field, value in changes.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has this id
    """
    job = db.get(Job, job_id)
    if not job:
        raise NotFoundError(f"No job: {job_id}")

    db.delete(job)
    db.commit()
