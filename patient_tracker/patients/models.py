# -*- coding: utf-8 -*-
"""Patients — Pydantic models.

Field names follow Python conventions; the JSON wire format keeps the
camelCase names clients already use (``nationalCode``, ``treatmentDetails``,
``asabKeshi``, ``jermGiri``) through aliases.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class PatientStatus(str, Enum):
    waiting = "waiting"
    curing = "curing"
    cured = "cured"
    canceled = "canceled"


class TreatmentDetails(BaseModel):
    """Outcome attached when a patient leaves treatment."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    jarahi: int = Field(0, ge=0)
    asab_keshi: int = Field(0, ge=0, alias="asabKeshi")
    tarmim: int = Field(0, ge=0)
    jerm_giri: int = Field(0, ge=0, alias="jermGiri")
    tozihat: str = ""


class Patient(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., description="Auto-generated sequential id")
    name: str
    phone: str
    national_code: str = Field(..., alias="nationalCode")
    status: PatientStatus = PatientStatus.waiting
    treatment_details: Optional[TreatmentDetails] = Field(None, alias="treatmentDetails")


class PatientCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    national_code: Optional[str] = Field(None, alias="nationalCode")


class StatusUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    national_code: Optional[str] = Field(None, alias="nationalCode")


class CompleteTreatmentRequest(BaseModel):
    # Counters are parsed leniently by the workflow, so any JSON value is accepted here.
    model_config = ConfigDict(populate_by_name=True)

    national_code: Optional[str] = Field(None, alias="nationalCode")
    jarahi: Any = None
    asab_keshi: Any = Field(None, alias="asabKeshi")
    tarmim: Any = None
    jerm_giri: Any = Field(None, alias="jermGiri")
    tozihat: Any = None


class CancelTreatmentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    national_code: Optional[str] = Field(None, alias="nationalCode")
    tozihat: Any = None


class ErrorResponse(BaseModel):
    error: str
