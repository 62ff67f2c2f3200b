from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator

from app.schemas.base import MAX_INT, CamelModel, StrictCamelModel, format_decimal


class CompanyNew(StrictCamelModel):
    """Schema for creating a company"""
    handle: StrictStr = Field(..., min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")
    name: StrictStr = Field(..., min_length=1)
    description: StrictStr = ""
    num_employees: Optional[StrictInt] = Field(None, ge=0, le=MAX_INT)
    logo_url: Optional[StrictStr] = None


class CompanyResponse(CamelModel):
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(CamelModel):
    """A job listed under its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None

    @field_validator("equity", mode="before")
    @classmethod
    def render_equity(cls, v):
        return format_decimal(v)


class CompanyDetail(CompanyResponse):
    jobs: List[CompanyJob] = []


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyDetailEnvelope(BaseModel):
    company: CompanyDetail


class CompanyListEnvelope(BaseModel):
    companies: List[CompanyResponse]
