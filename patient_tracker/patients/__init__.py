# -*- coding: utf-8 -*-
"""Patients domain: record store, treatment workflow and HTTP routes."""

from .errors import ConflictError, NotFoundError, PatientError, ValidationError
from .models import Patient, PatientStatus, TreatmentDetails
from .storage import RecordStore
from .workflow import TreatmentWorkflow

__all__ = [
    'ConflictError',
    'NotFoundError',
    'Patient',
    'PatientError',
    'PatientStatus',
    'RecordStore',
    'TreatmentDetails',
    'TreatmentWorkflow',
    'ValidationError',
]
