# -*- coding: utf-8 -*-
"""Patients — API endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request

from .models import (
    CancelTreatmentRequest,
    CompleteTreatmentRequest,
    ErrorResponse,
    Patient,
    PatientCreateRequest,
    StatusUpdateRequest,
)
from .storage import RecordStore
from .workflow import TreatmentWorkflow

router = APIRouter(prefix="/api/users", tags=["User"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_CODE_REQUIRED = {400: {"model": ErrorResponse, "description": "National Code is required"}}


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_workflow(request: Request) -> TreatmentWorkflow:
    return request.app.state.workflow


# Body defaults are empty requests: a missing body reaches the presence checks
# and gets the same error message as an empty object.
@router.post(
    "",
    status_code=201,
    response_model=Patient,
    response_model_exclude_none=True,
    summary="Create a new user",
    responses={
        400: {"model": ErrorResponse, "description": "All fields are required"},
        409: {"model": ErrorResponse, "description": "A user with this name or national code already exists"},
    },
)
def create_patient_api(
    request: PatientCreateRequest = PatientCreateRequest(),
    store: RecordStore = Depends(get_store),
):
    return store.create(request.name, request.phone, request.national_code)


@router.get(
    "",
    response_model=List[Patient],
    response_model_exclude_none=True,
    summary="Retrieve all users",
)
def list_patients_api(store: RecordStore = Depends(get_store)):
    return store.list_all()


@router.post(
    "/update-status",
    response_model=Patient,
    response_model_exclude_none=True,
    summary='Update user status to "curing"',
    responses={**_CODE_REQUIRED, **_NOT_FOUND},
)
def begin_treatment_api(
    request: StatusUpdateRequest = StatusUpdateRequest(),
    workflow: TreatmentWorkflow = Depends(get_workflow),
):
    return workflow.begin(request.national_code)


@router.post(
    "/complete-treatment",
    response_model=Patient,
    response_model_exclude_none=True,
    summary='Update user status to "cured" and add treatment details',
    responses={**_CODE_REQUIRED, **_NOT_FOUND},
)
def complete_treatment_api(
    request: CompleteTreatmentRequest = CompleteTreatmentRequest(),
    workflow: TreatmentWorkflow = Depends(get_workflow),
):
    return workflow.complete(
        request.national_code,
        jarahi=request.jarahi,
        asab_keshi=request.asab_keshi,
        tarmim=request.tarmim,
        jerm_giri=request.jerm_giri,
        tozihat=request.tozihat,
    )


@router.post(
    "/cancel-treatment",
    response_model=Patient,
    response_model_exclude_none=True,
    summary='Update user status to "canceled" and reset treatment details',
    responses={**_CODE_REQUIRED, **_NOT_FOUND},
)
def cancel_treatment_api(
    request: CancelTreatmentRequest = CancelTreatmentRequest(),
    workflow: TreatmentWorkflow = Depends(get_workflow),
):
    return workflow.cancel(request.national_code, tozihat=request.tozihat)
