from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

# Decimal string in [0, 1]: "0", "0.25", "1", "1.000". ASCII digits only;
# the pattern engine treats \d as any Unicode digit.
EQUITY_PATTERN = r"^(0(\.[0-9]+)?|1(\.0+)?)$"


class JobCreateRequest(BaseModel):
    """Schema for creating a new job. All four fields are required."""
    model_config = ConfigDict(extra="forbid", strict=True)

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(..., ge=0)
    equity: Optional[str] = Field(..., pattern=EQUITY_PATTERN)
    company_handle: str = Field(..., alias="companyHandle", min_length=1, max_length=25)


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    Only keys present in the request body are written; callers dump this
    model with ``exclude_unset=True``. ``id`` and ``companyHandle`` are
    immutable and rejected as unknown keys.
    """
    model_config = ConfigDict(extra="forbid", strict=True)

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v):
        """title is NOT NULL in storage; an explicit null is rejected"""
        if v is None:
            raise ValueError("title may not be null")
        return v


class JobFilter(BaseModel):
    """Query-string filters accepted by the job listing endpoint"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    min_salary: Optional[int] = Field(None, alias="minSalary", ge=0)
    has_equity: Optional[bool] = Field(None, alias="hasEquity")


class JobOut(BaseModel):
    """A job row as returned by the repository"""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str = Field(..., alias="companyHandle")

    @field_validator("equity", mode="before")
    @classmethod
    def equity_as_string(cls, v):
        """NUMERIC columns come back as Decimal (PostgreSQL) or float/int (SQLite)"""
        if v is None or isinstance(v, str):
            return v
        return str(v)


class JobResponse(BaseModel):
    """Schema for single job response"""
    job: JobOut


class JobListResponse(BaseModel):
    """Schema for job listing response"""
    jobs: List[JobOut]


class JobDeleteResponse(BaseModel):
    """Schema for job deletion response"""
    deleted: str
