# -*- coding: utf-8 -*-
"""Patients — domain errors.

Each error carries the HTTP status the API layer answers with.
"""

from __future__ import annotations


class PatientError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PatientError):
    """A required input is missing or empty."""

    status_code = 400


class ConflictError(PatientError):
    """Creating the record would duplicate a name or national code."""

    status_code = 409


class NotFoundError(PatientError):
    """No record matches the given national code."""

    status_code = 404
