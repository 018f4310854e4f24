"""
Emergency record model: one base record plus three variants (Medical, Fire,
Police). Each variant renders itself for the console and serializes itself to
one comma-joined line of the persisted file.

The persisted line layout is:
    <Type>,<Id>,<Location>,<Description>,<Priority>,<Status>,<variant fields...>
Fields are not escaped; a comma inside any free-text field will split that
field on the next load.
"""

import time
from dataclasses import dataclass, field
from typing import ClassVar, Optional

# Conventional progression: Pending → Dispatched → Resolved. Not enforced.
STATUSES = ("Pending", "Dispatched", "Resolved")

SEPARATOR = "------------------------"


class MalformedRecordError(ValueError):
    """A persisted line whose numeric fields could not be read."""


def split_field(text: str) -> tuple:
    """
    Consume one field from the front of a persisted line.
    Returns (field, remainder). A line with no comma left yields the whole
    text as the field and an empty remainder.
    """
    value, _, rest = text.partition(",")
    return value, rest


def parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise MalformedRecordError(f"{name} is not an integer: {value!r}") from None


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _flag(flag: bool) -> str:
    return "1" if flag else "0"


# =============================================================================
# Base record
# =============================================================================

@dataclass
class Emergency:
    """Common fields shared by every incident."""

    TYPE: ClassVar[str] = "General"

    location: str
    description: str
    priority: int                    # 1-5, 1 is highest; not range-checked
    status: str = field(default="Pending", init=False)
    timestamp: int = field(init=False, compare=False)  # Creation time, only used to derive id
    id: str = field(init=False, compare=False)

    def __post_init__(self):
        self.timestamp = int(time.time())
        # Not unique: two records created 10000s apart (or in the same second) share an id.
        self.id = f"E{self.timestamp % 10000}"

    def get_type(self) -> str:
        return self.TYPE

    def update_status(self, new_status: str):
        """Replace the status unconditionally; any text is accepted."""
        self.status = new_status

    def render(self) -> str:
        lines = [
            f"Emergency ID: {self.id}",
            f"Location: {self.location}",
            f"Description: {self.description}",
            f"Priority: {self.priority}",
            f"Status: {self.status}",
        ]
        return "\n".join(lines)

    def display(self):
        # Undecodable bytes from the data file are kept as surrogates; show them as U+FFFD.
        text = self.render().encode("utf-8", "surrogateescape").decode("utf-8", "replace")
        print(text)

    def extra_fields(self) -> list:
        return []

    def to_file_string(self) -> str:
        common = [
            self.get_type(),
            self.id,
            self.location,
            self.description,
            str(self.priority),
            self.status,
        ]
        return ",".join(common + self.extra_fields())


# =============================================================================
# Variants
# =============================================================================

@dataclass
class MedicalEmergency(Emergency):
    TYPE: ClassVar[str] = "Medical"

    patient_name: str
    condition: str
    is_urgent: bool

    def render(self) -> str:
        return "\n".join([
            super().render(),
            "Type: Medical Emergency",
            f"Patient: {self.patient_name}",
            f"Condition: {self.condition}",
            f"Urgent: {_yes_no(self.is_urgent)}",
            SEPARATOR,
        ])

    def extra_fields(self) -> list:
        return [self.patient_name, self.condition, _flag(self.is_urgent)]

    @classmethod
    def from_fields(cls, location: str, description: str, priority: int, rest: str) -> "MedicalEmergency":
        patient, rest = split_field(rest)
        condition, rest = split_field(rest)
        # Trailing field: the whole remainder must be exactly "1".
        return cls(location, description, priority, patient, condition, rest == "1")


@dataclass
class FireEmergency(Emergency):
    TYPE: ClassVar[str] = "Fire"

    building_type: str
    severity: int                    # 1-5; not range-checked
    hazardous_materials: bool

    def render(self) -> str:
        return "\n".join([
            super().render(),
            "Type: Fire Emergency",
            f"Building Type: {self.building_type}",
            f"Severity (1-5): {self.severity}",
            f"Hazardous Materials: {_yes_no(self.hazardous_materials)}",
            SEPARATOR,
        ])

    def extra_fields(self) -> list:
        return [self.building_type, str(self.severity), _flag(self.hazardous_materials)]

    @classmethod
    def from_fields(cls, location: str, description: str, priority: int, rest: str) -> "FireEmergency":
        building, rest = split_field(rest)
        severity, rest = split_field(rest)
        return cls(location, description, priority, building, parse_int(severity, "severity"), rest == "1")


@dataclass
class PoliceEmergency(Emergency):
    TYPE: ClassVar[str] = "Police"

    crime_type: str
    suspect_armed: bool
    officers_needed: int             # Not range-checked

    def render(self) -> str:
        return "\n".join([
            super().render(),
            "Type: Police Emergency",
            f"Crime Type: {self.crime_type}",
            f"Suspect Armed: {_yes_no(self.suspect_armed)}",
            f"Officers Needed: {self.officers_needed}",
            SEPARATOR,
        ])

    def extra_fields(self) -> list:
        return [self.crime_type, _flag(self.suspect_armed), str(self.officers_needed)]

    @classmethod
    def from_fields(cls, location: str, description: str, priority: int, rest: str) -> "PoliceEmergency":
        crime, rest = split_field(rest)
        armed, rest = split_field(rest)
        return cls(location, description, priority, crime, armed == "1", parse_int(rest, "officers needed"))


# Loadable variants, keyed by the type tag written as the first field.
# "General" is deliberately absent: base records are never read back.
RECORD_TYPES = {
    MedicalEmergency.TYPE: MedicalEmergency,
    FireEmergency.TYPE: FireEmergency,
    PoliceEmergency.TYPE: PoliceEmergency,
}


def record_class(type_tag: str) -> Optional[type]:
    return RECORD_TYPES.get(type_tag)
