"""
Record store: keeps every emergency in memory (insertion order) and mirrors the
whole collection to a flat comma-delimited file.

Every mutation rewrites the file in full, so after each add or status update
the file holds exactly one line per in-memory record.
"""

import sys
from typing import Iterator, List, Optional

from dispatcher.config import MAX_EMERGENCIES
from dispatcher.models import (
    Emergency,
    MalformedRecordError,
    parse_int,
    record_class,
    split_field,
)


def parse_record(line: str) -> Optional[Emergency]:
    """
    Rebuild one record from a persisted line.

    Returns None for an unrecognized type tag (the line is skipped silently).
    Raises MalformedRecordError if the priority or a numeric variant field is
    not an integer.

    The persisted id is read and dropped: the rebuilt record gets a fresh id
    from the current time.
    """
    type_tag, rest = split_field(line)
    cls = record_class(type_tag)
    if cls is None:
        return None

    _persisted_id, rest = split_field(rest)
    location, rest = split_field(rest)
    description, rest = split_field(rest)
    priority, rest = split_field(rest)
    status, rest = split_field(rest)

    record = cls.from_fields(location, description, parse_int(priority, "priority"), rest)
    record.update_status(status)
    return record


class EmergencyDispatcher:
    """Owns the record collection and its persisted file."""

    def __init__(self, filename: str, max_emergencies: int = MAX_EMERGENCIES):
        self.filename = filename
        self.max_emergencies = max_emergencies
        self._emergencies: List[Emergency] = []
        self.load_from_file()

    def __len__(self) -> int:
        return len(self._emergencies)

    def __iter__(self) -> Iterator[Emergency]:
        return iter(self._emergencies)

    @property
    def emergencies(self) -> List[Emergency]:
        return list(self._emergencies)

    # -------------------------------------------------------------------------
    # Mutations (each one rewrites the file)
    # -------------------------------------------------------------------------

    def add_emergency(self, emergency: Emergency) -> bool:
        """Append a record and persist. False if the store is full."""
        if len(self._emergencies) >= self.max_emergencies:
            return False
        self._emergencies.append(emergency)
        self.save_to_file()
        return True

    def update_emergency_status(self, emergency_id: str, new_status: str) -> bool:
        """
        Set the status of the first record whose id matches exactly.
        False (and no write) if no record has that id.
        """
        emergency = self.get_emergency(emergency_id)
        if emergency is None:
            return False
        emergency.update_status(new_status)
        self.save_to_file()
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_emergency(self, emergency_id: str) -> Optional[Emergency]:
        for emergency in self._emergencies:
            if emergency.id == emergency_id:
                return emergency
        return None

    def display_all_emergencies(self):
        if not self._emergencies:
            print("No emergencies recorded.")
            return
        for emergency in self._emergencies:
            emergency.display()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def save_to_file(self) -> bool:
        """
        Truncate the file and write one line per record.
        A write failure is reported on stderr and swallowed; memory stays intact.
        """
        try:
            with open(self.filename, "w", encoding="utf-8", errors="surrogateescape") as f:
                for emergency in self._emergencies:
                    f.write(emergency.to_file_string() + "\n")
        except OSError as e:
            print(f"[Store] Error: Could not open file for writing. ({e})", file=sys.stderr)
            return False
        return True

    def load_from_file(self) -> int:
        """
        Append records read from the file, stopping at capacity.
        A missing or unreadable file means no records. Malformed lines are reported and skipped.
        Returns the number of records loaded.
        """
        try:
            f = open(self.filename, encoding="utf-8", errors="surrogateescape")
        except OSError:
            return 0

        loaded = 0
        with f:
            for line_no, line in enumerate(f, start=1):
                if len(self._emergencies) >= self.max_emergencies:
                    break
                try:
                    record = parse_record(line.rstrip("\r\n"))
                except MalformedRecordError as e:
                    print(f"[Store] Skipping malformed record on line {line_no}: {e}", file=sys.stderr)
                    continue
                if record is None:
                    continue
                self._emergencies.append(record)
                loaded += 1
        return loaded
