"""Request/response Pydantic models."""

from typing import Literal

from pydantic import BaseModel, Field

from src.audit.fetch import FetchErrorKind
from src.audit.models import PageSignals, Report


class AnalyzeRequest(BaseModel):
    model_config = {"str_strip_whitespace": True}

    url: str = Field(min_length=1)


class ErrorDetail(BaseModel):
    kind: FetchErrorKind
    message: str


class AnalyzeSuccess(BaseModel):
    success: Literal[True] = True
    data: PageSignals
    report: Report


class AnalyzeFailure(BaseModel):
    success: Literal[False] = False
    error: ErrorDetail
