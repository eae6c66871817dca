"""A small clinic register: patients and five daily appointment slots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

SLOT_TIMES = (
    "02:00 pm to 02:30 pm",
    "02:30 pm to 03:00 pm",
    "03:00 pm to 03:30 pm",
    "04:00 pm to 04:30 pm",
    "04:30 pm to 05:00 pm",
)
NO_RESERVATION = "No reservation"
GENDERS = {"f": "female", "m": "male"}


def slot_time(index: int | None) -> str:
    """The time span of slot ``index``; -1 or None means no reservation."""
    if index is None or index == -1:
        return NO_RESERVATION
    if not 0 <= index < len(SLOT_TIMES):
        raise ValueError(f"slot must be in 0..{len(SLOT_TIMES) - 1}, got {index}")
    return SLOT_TIMES[index]


def _check_gender(gender: str) -> str:
    if gender not in GENDERS:
        raise ValueError(f"gender must be 'f' or 'm', got {gender!r}")
    return gender


@dataclass
class Patient:
    """One registered patient and the slot reserved for them, if any."""

    id: int
    name: str
    age: int
    gender: str
    slot: int | None = None

    @property
    def gender_name(self) -> str:
        return GENDERS[self.gender]


class Reservation(NamedTuple):
    """An occupied slot: its time span and the patient holding it."""

    time: str
    patient: Patient


class Clinic:
    """Patients kept by id, newest first when listed, and the day's slots."""

    def __init__(self) -> None:
        self._patients: dict[int, Patient] = {}
        self._slots: list[Patient | None] = [None] * len(SLOT_TIMES)

    def has_patient(self, patient_id: int) -> bool:
        """True when a patient with this id is registered."""
        return patient_id in self._patients

    def add_patient(self, patient_id: int, name: str, age: int, gender: str) -> Patient:
        """Register a new patient with no reservation."""
        if self.has_patient(patient_id):
            raise ValueError(f"patient {patient_id} already exists")
        patient = Patient(patient_id, name, age, _check_gender(gender))
        self._patients[patient_id] = patient
        return patient

    def _get(self, patient_id: int) -> Patient:
        try:
            return self._patients[patient_id]
        except KeyError:
            raise KeyError(f"patient {patient_id} not found") from None

    def remove_patient(self, patient_id: int) -> Patient:
        """Remove a patient, releasing any slot they hold."""
        patient = self._get(patient_id)
        if patient.slot is not None:
            self._slots[patient.slot] = None
        del self._patients[patient_id]
        return patient

    def edit_patient(
        self,
        patient_id: int,
        *,
        name: str | None = None,
        age: int | None = None,
        gender: str | None = None,
    ) -> Patient:
        """Change the given fields of a patient's record."""
        patient = self._get(patient_id)
        if gender is not None:
            patient.gender = _check_gender(gender)
        if name is not None:
            patient.name = name
        if age is not None:
            patient.age = age
        return patient

    def search_patient(self, patient_id: int) -> Patient | None:
        """The patient with this id, or None."""
        return self._patients.get(patient_id)

    def list_patients(self) -> list[Patient]:
        """All patients, most recently added first."""
        return list(reversed(self._patients.values()))

    def format_patient(self, patient_id: int) -> str:
        """A patient's record as four labelled lines."""
        patient = self._get(patient_id)
        return (
            f"ID: {patient.id}\nName: {patient.name}\n"
            f"Age: {patient.age}\nGender: {patient.gender_name}"
        )

    def add_slot(self, patient_id: int, choice: int) -> bool:
        """Book the ``choice``-th free slot (counting from 1) for a patient.

        Returns False when the patient is unknown or the choice is not
        among the free slots. A patient who already holds a slot moves.
        """
        patient = self.search_patient(patient_id)
        if patient is None:
            return False
        free = [index for index, holder in enumerate(self._slots) if holder is None]
        if not 1 <= choice <= len(free):
            return False
        if patient.slot is not None:
            self._slots[patient.slot] = None
        index = free[choice - 1]
        self._slots[index] = patient
        patient.slot = index
        return True

    def cancel_slot(self, patient_id: int) -> None:
        """Release the slot a patient holds, if any."""
        patient = self._get(patient_id)
        if patient.slot is not None:
            self._slots[patient.slot] = None
            patient.slot = None

    def reservations(self) -> list[Reservation]:
        """Occupied slots in time order."""
        return [
            Reservation(SLOT_TIMES[index], holder)
            for index, holder in enumerate(self._slots)
            if holder is not None
        ]

    def reservation_count(self) -> int:
        """Number of occupied slots."""
        return sum(holder is not None for holder in self._slots)

    def available_slots(self) -> list[str]:
        """Time spans of the free slots, in the order ``add_slot`` numbers them."""
        return [
            SLOT_TIMES[index]
            for index, holder in enumerate(self._slots)
            if holder is None
        ]