import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, Path, Request
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin
from app.core.validation import validate_payload
from app.crud import job as job_crud
from app.schemas.base import MAX_INT
from app.schemas.job import (
    JobDeletedResponse,
    JobDetail,
    JobDetailEnvelope,
    JobEnvelope,
    JobListEnvelope,
    JobNew,
    JobResponse,
    JobSearch,
    JobSummary,
    JobUpdate,
    parse_job_search_params,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post(
    "",
    status_code=201,
    response_model=JobEnvelope,
    dependencies=[Depends(ensure_admin)]
)
def create_job(payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Create a new job posting.

    Body: { title, companyHandle, salary?, equity? }

    Returns { job: { id, title, salary, equity, companyHandle } }

    Authorization required: admin
    """
    job_data = validate_payload(JobNew, payload)
    new_job = job_crud.create(db, job_data)

    logger.info(f"Created job {new_job.id}: {new_job.title} ({new_job.company_handle})")
    return JobEnvelope(job=JobResponse.model_validate(new_job))


@router.get("", response_model=JobListEnvelope)
def list_jobs(request: Request, db: Session = Depends(get_db)):
    """
    List jobs, optionally filtered.

    Query filters:
    - minSalary: only jobs with salary >= minSalary
    - hasEquity: "true" returns only jobs with equity > 0; any other value is ignored
    - title: case-insensitive partial match

    Returns { jobs: [ { id, title, salary, equity, companyHandle, companyName }, ... ] }

    Authorization required: none
    """
    query = parse_job_search_params(request.query_params)
    search = validate_payload(JobSearch, query)

    jobs = job_crud.get_multi(
        db,
        min_salary=search.min_salary,
        has_equity=search.has_equity,
        title=search.title
    )
    return JobListEnvelope(jobs=[JobSummary.model_validate(job) for job in jobs])


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int = Path(..., ge=0, le=MAX_INT), db: Session = Depends(get_db)):
    """
    Retrieve a job by ID, including its company.

    Authorization required: none
    """
    job = job_crud.get(db, job_id)
    return JobDetailEnvelope(job=JobDetail.model_validate(job))


@router.patch(
    "/{job_id}",
    response_model=JobEnvelope,
    dependencies=[Depends(ensure_admin)]
)
def update_job(job_id: int = Path(..., ge=0, le=MAX_INT), payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Update a job. Body may include { title, salary, equity }.

    Authorization required: admin
    """
    job_data = validate_payload(JobUpdate, payload)
    updated_job = job_crud.update(db, job_id, job_data)

    logger.info(f"Updated job {job_id}: {sorted(job_data.model_fields_set)}")
    return JobEnvelope(job=JobResponse.model_validate(updated_job))


@router.delete(
    "/{job_id}",
    response_model=JobDeletedResponse,
    dependencies=[Depends(ensure_admin)]
)
def delete_job(job_id: int = Path(..., ge=0, le=MAX_INT), db: Session = Depends(get_db)):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    job_crud.remove(db, job_id)

    logger.info(f"Deleted job {job_id}")
    return JobDeletedResponse(deleted=job_id)
