import logging
from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.core.database import Database, get_db
from app.core.deps import ensure_admin
from app.crud import job as job_crud
from app.schemas.job import (
    JobCreateRequest,
    JobDeleteResponse,
    JobFilter,
    JobListResponse,
    JobResponse,
    JobUpdateRequest,
)
from app.schemas.user import TokenUser

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


def get_job_filters(request: Request) -> JobFilter:
    """
    Validate the listing query string against JobFilter.

    Unknown keys are rejected. minSalary and hasEquity arrive as strings and
    are coerced to int and bool during validation.
    """
    try:
        return JobFilter.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("query", *err["loc"])} for err in e.errors()]
        )


@router.post("/", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    db: Database = Depends(get_db),
    admin: TokenUser = Depends(ensure_admin)
):
    """
    Create a new job posting.

    Body: { title, salary, equity, companyHandle }

    Returns { job: { id, title, salary, equity, companyHandle } }

    Authorization required: admin
    """
    job = job_crud.create(db, request)
    logger.info(f"Admin {admin.username} created job {job.id}")
    return JobResponse(job=job)


@router.get("/", response_model=JobListResponse)
def list_jobs(
    filters: JobFilter = Depends(get_job_filters),
    db: Database = Depends(get_db)
):
    """
    List jobs, optionally filtered.

    Query parameters:
        title: case-insensitive partial match on the job title
        minSalary: only jobs paying at least this much
        hasEquity: when true, only jobs with non-zero equity

    Authorization required: none
    """
    jobs = job_crud.find(db, filters)
    return JobListResponse(jobs=jobs)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, db: Database = Depends(get_db)):
    """
    Retrieve a job by ID.

    Authorization required: none
    """
    job = job_crud.get(db, job_id)
    return JobResponse(job=job)


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Database = Depends(get_db),
    admin: TokenUser = Depends(ensure_admin)
):
    """
    Partially update a job.

    Body: any non-empty subset of { title, salary, equity }. Fields left out
    keep their current value.

    Authorization required: admin
    """
    changes = request.model_dump(exclude_unset=True, by_alias=True)
    job = job_crud.update(db, job_id, changes)
    return JobResponse(job=job)


@router.delete("/{job_id}", response_model=JobDeleteResponse)
def delete_job(
    job_id: int,
    db: Database = Depends(get_db),
    admin: TokenUser = Depends(ensure_admin)
):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    job_crud.remove(db, job_id)
    logger.info(f"Admin {admin.username} deleted job {job_id}")
    return JobDeleteResponse(deleted=str(job_id))
