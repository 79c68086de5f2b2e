# -*- coding: utf-8 -*-
"""Patients — in-memory record store.

One ``RecordStore`` is created per application and owns both the record
list and the id counter. Records are frozen pydantic models, so the
instances handed out can be shared freely; updates swap in a new value at
the same position.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional

from .errors import ConflictError, NotFoundError, ValidationError
from .models import Patient, PatientStatus

logger = logging.getLogger(__name__)

_MUTABLE_FIELDS = frozenset({"status", "treatment_details"})


class RecordStore:
    """Authoritative collection of patient records."""

    def __init__(self) -> None:
        self._records: List[Patient] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def create(self, name: Optional[str], phone: Optional[str], national_code: Optional[str]) -> Patient:
        if not name or not phone or not national_code:
            raise ValidationError("All fields are required")

        with self._lock:
            existing = next(
                (r for r in self._records if r.name == name or r.national_code == national_code),
                None,
            )
            if existing is not None:
                if existing.name == name:
                    raise ConflictError("A user with this name already exists")
                raise ConflictError("A user with this national code already exists")

            self._last_id += 1
            patient = Patient(
                id=self._last_id,
                name=name,
                phone=phone,
                national_code=national_code,
                status=PatientStatus.waiting,
            )
            self._records.append(patient)

        logger.info("Patient created: id=%s", patient.id)
        return patient

    def list_all(self) -> List[Patient]:
        with self._lock:
            return list(self._records)

    def find_by_national_code(self, national_code: str) -> Optional[Patient]:
        with self._lock:
            return self._find(national_code)

    def update(self, national_code: str, **changes: Any) -> Patient:
        """Replace the record matching ``national_code`` with an updated copy.

        Only ``status`` and ``treatment_details`` may change; identity fields
        are fixed at creation.

        Raises:
            NotFoundError: no record has this national code.
        """
        illegal = set(changes) - _MUTABLE_FIELDS
        if illegal:
            raise ValueError(f"cannot update fields: {', '.join(sorted(illegal))}")

        with self._lock:
            for index, record in enumerate(self._records):
                if record.national_code == national_code:
                    updated = record.model_copy(update=changes)
                    self._records[index] = updated
                    break
            else:
                raise NotFoundError("User not found")

        logger.info("Patient %s status -> %s", updated.id, updated.status.value)
        return updated

    def _find(self, national_code: str) -> Optional[Patient]:
        for record in self._records:
            if record.national_code == national_code:
                return record
        return None
