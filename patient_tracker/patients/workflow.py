# -*- coding: utf-8 -*-
"""Patients — treatment workflow.

    waiting --begin--> curing --complete--> cured
                       curing --cancel----> canceled

Transitions are not guarded against the current status: completing or
canceling a waiting patient is allowed, and so is re-running a transition.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from .errors import ValidationError
from .models import Patient, PatientStatus, TreatmentDetails
from .storage import RecordStore

_INT_PREFIX = re.compile(r"^[ \t\n\r\f\v]*([+-]?[0-9]+)")


def parse_count(value: Any) -> int:
    """Leniently parse a treatment counter.

    Accepts ints, floats (truncated) and strings with a leading integer
    (``"3"``, ``"3 sessions"``, ``"2.9"``). Anything else, and any negative
    result, becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        number = int(value)
    elif isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if not match:
            return 0
        try:
            number = int(match.group(1))
        except ValueError:
            # digit run past the interpreter's int conversion limit
            return 0
    else:
        return 0
    return max(number, 0)


def parse_note(value: Any) -> str:
    if not value:
        return ""
    return str(value)


def _require_code(national_code: Optional[str]) -> str:
    if not national_code:
        raise ValidationError("National Code is required")
    return national_code


class TreatmentWorkflow:
    """Status transitions on top of a ``RecordStore``."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def begin(self, national_code: Optional[str]) -> Patient:
        code = _require_code(national_code)
        return self.store.update(code, status=PatientStatus.curing)

    def complete(
        self,
        national_code: Optional[str],
        jarahi: Any = None,
        asab_keshi: Any = None,
        tarmim: Any = None,
        jerm_giri: Any = None,
        tozihat: Any = None,
    ) -> Patient:
        code = _require_code(national_code)
        details = TreatmentDetails(
            jarahi=parse_count(jarahi),
            asab_keshi=parse_count(asab_keshi),
            tarmim=parse_count(tarmim),
            jerm_giri=parse_count(jerm_giri),
            tozihat=parse_note(tozihat),
        )
        return self.store.update(code, status=PatientStatus.cured, treatment_details=details)

    def cancel(self, national_code: Optional[str], tozihat: Any = None) -> Patient:
        code = _require_code(national_code)
        details = TreatmentDetails(tozihat=parse_note(tozihat))
        return self.store.update(code, status=PatientStatus.canceled, treatment_details=details)
