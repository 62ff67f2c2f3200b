from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator

from app.schemas.base import MAX_INT, CamelModel, StrictCamelModel, format_decimal

# Decimal string in [0, 1]: "0", "0.05", ".05", "1", "1.0"
EQUITY_PATTERN = r"^(0|1|0?\.[0-9]+|1\.0+)$"


class JobNew(StrictCamelModel):
    """Schema for creating a new job"""
    title: StrictStr = Field(..., min_length=1)
    salary: Optional[StrictInt] = Field(None, ge=0, le=MAX_INT)
    equity: Optional[StrictStr] = Field(None, pattern=EQUITY_PATTERN)
    company_handle: StrictStr = Field(..., min_length=1, max_length=25)


class JobUpdate(StrictCamelModel):
    """
    Schema for updating a job.

    Every field is optional; id and companyHandle are not updatable and are
    rejected as unknown keys. Title may be omitted but never set to null.
    """
    title: StrictStr = Field(None, min_length=1)
    salary: Optional[StrictInt] = Field(None, ge=0, le=MAX_INT)
    equity: Optional[StrictStr] = Field(None, pattern=EQUITY_PATTERN)


class JobSearch(StrictCamelModel):
    """Schema for the (already coerced) job list filters"""
    min_salary: Optional[StrictInt] = Field(None, ge=0, le=MAX_INT)
    has_equity: StrictBool = False
    title: Optional[StrictStr] = Field(None, min_length=1)


def parse_job_search_params(params: Mapping[str, str]) -> Dict[str, Any]:
    """
    Coerce raw query-string values into the types JobSearch expects.

    - minSalary: parsed as a base-10 integer; values that do not parse are
      left as strings so validation reports them.
    - hasEquity: True only for the literal string "true", False otherwise
      (including when absent).

    Other keys are copied unchanged.
    """
    query: Dict[str, Any] = dict(params)

    if "minSalary" in query:
        try:
            query["minSalary"] = int(query["minSalary"])
        except ValueError:
            pass

    query["hasEquity"] = query.get("hasEquity") == "true"
    return query


class JobResponse(CamelModel):
    """A job as returned by create and update"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str

    @field_validator("equity", mode="before")
    @classmethod
    def render_equity(cls, v):
        return format_decimal(v)


class JobSummary(JobResponse):
    """A job in list results, with the owning company's name"""
    company_name: Optional[str] = None


class JobCompany(CamelModel):
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class JobDetail(JobResponse):
    """A single job with its company"""
    company: JobCompany


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetail


class JobListEnvelope(BaseModel):
    jobs: List[JobSummary]


class JobDeletedResponse(BaseModel):
    deleted: int
