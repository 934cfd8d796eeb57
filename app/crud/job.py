"""
CRUD operations for jobs.

Implements the Repository pattern over the storage client: every function
takes the Database instance as its first argument and issues exactly one
parameterized statement against the jobs table.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from app.core.database import Database
from app.core.exceptions import NotFoundError
from app.crud.sql import WhereClause, sql_for_partial_update
from app.schemas.job import JobCreateRequest, JobFilter, JobOut

logger = logging.getLogger(__name__)

# Logical field name -> column name, where they differ
JOB_COLUMNS: Dict[str, str] = {"companyHandle": "company_handle"}

JOB_RETURNING = 'id, title, salary, equity, company_handle AS "companyHandle"'


def create(db: Database, job_data: JobCreateRequest) -> JobOut:
    """
    Create a new job in the database.

    Args:
        db: Storage client
        job_data: Validated job creation data

    Returns:
        Created job with its generated id

    Constraint violations (e.g. unknown company handle) propagate as raised
    by the driver.
    """
    result = db.query(
        f"""INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_RETURNING}""",
        [job_data.title, job_data.salary, job_data.equity, job_data.company_handle]
    )
    job = JobOut.model_validate(result.rows[0])

    logger.info(f"Created job {job.id}: {job.title} ({job.company_handle})")
    return job


def find(db: Database, filters: Optional[JobFilter] = None) -> List[JobOut]:
    """
    Find all jobs matching the provided filters.

    Args:
        db: Storage client
        filters: Optional title substring (case-insensitive), minimum salary
            (inclusive) and has_equity (equity > 0). Missing filters add no
            constraint; no filters returns every job.

    Returns:
        List of jobs in the order storage returns them
    """
    where = WhereClause()

    if filters is not None:
        if filters.title:
            where.add("lower(title) LIKE lower({})", f"%{filters.title}%")
        if filters.min_salary is not None:
            where.add("salary >= {}", filters.min_salary)
        if filters.has_equity:
            where.add_literal("equity > 0")

    result = db.query(f"SELECT {JOB_RETURNING} FROM jobs{where.sql}", where.params)
    return [JobOut.model_validate(row) for row in result.rows]


def get(db: Database, job_id: int) -> JobOut:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no job has this id
    """
    result = db.query(f"SELECT {JOB_RETURNING} FROM jobs WHERE id = $1", [job_id])

    if not result.rows:
        logger.warning(f"Job {job_id} not found")
        raise NotFoundError(f"No job: {job_id}")

    return JobOut.model_validate(result.rows[0])


def update(db: Database, job_id: int, data: Mapping[str, Any]) -> JobOut:
    """
    Partially update a job.

    Only the fields present in ``data`` are written; every other column keeps
    its stored value.

    Args:
        db: Storage client
        job_id: Job ID to update
        data: Any non-empty subset of {title, salary, equity}

    Returns:
        The updated job

    Raises:
        InvalidInputError: If data is empty
        NotFoundError: If no job has this id
    """
    set_cols, values = sql_for_partial_update(data, JOB_COLUMNS)
    id_idx = len(values) + 1

    result = db.query(
        f"""UPDATE jobs
            SET {set_cols}
            WHERE id = ${id_idx}
            RETURNING {JOB_RETURNING}""",
        [*values, job_id]
    )

    if not result.rows:
        logger.warning(f"Job {job_id} not found for update")
        raise NotFoundError(f"No job: {job_id}")

    logger.info(f"Updated job {job_id}: {', '.join(data)}")
    return JobOut.model_validate(result.rows[0])


def remove(db: Database, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has this id
    """
    result = db.query("DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])

    if not result.rows:
        logger.warning(f"Job {job_id} not found for delete")
        raise NotFoundError(f"No job: {job_id}")

    logger.info(f"Deleted job {job_id}")
