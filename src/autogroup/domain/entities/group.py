"""Group record model and autogroup identifier helpers.

A group record is the flat attribute set of a course group as it is
stored and as it is handed to the group mutation primitives. Autogroups
are told apart from other groups purely by their ``id_number``, which
carries the ``autogroup|<group set id>`` marker.
"""

import re
import time
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

AUTOGROUP_MARKER = "autogroup|"

_GROUP_SET_ID = re.compile(r"[0-9]+")


class GroupRecord(BaseModel):
    """Typed attribute set of a course group.

    Unknown fields on the source record are ignored and missing fields
    keep the defaults declared here. Policy attributes (enrolment key,
    picture, visibility, participation) are carried opaquely.
    """

    model_config = ConfigDict(extra="ignore")

    id: int = 0
    course_id: int = 0
    id_number: str = ""
    name: str = ""
    description: str | None = ""
    description_format: int = 1
    enrolment_key: str | None = ""
    picture: int = 0
    time_created: int = 0
    time_modified: int = 0
    visibility: int = 0
    participation: int = 1


def validate_group_record(raw: Any) -> dict[str, Any] | None:
    """Check that a raw record describes an autogroup.

    Missing timestamps are defaulted on the returned copy: ``time_created``
    to now and ``time_modified`` to 0. The input mapping is not modified.

    Args:
        raw: The raw record, normally a mapping of column name to value.

    Returns:
        A normalised copy of the record, or None if it is not a valid
        autogroup record.
    """
    if not isinstance(raw, Mapping):
        return None

    record = dict(raw)
    if record.get("time_created") is None:
        record["time_created"] = int(time.time())
    if record.get("time_modified") is None:
        record["time_modified"] = 0

    group_id = record.get("id")
    if not isinstance(group_id, int) or isinstance(group_id, bool) or group_id < 0:
        return None

    name = record.get("name")
    if not isinstance(name, str) or not name:
        return None

    id_number = record.get("id_number")
    if not isinstance(id_number, str) or AUTOGROUP_MARKER not in id_number:
        return None

    return record


def parse_group_record(raw: Any) -> GroupRecord | None:
    """Validate a raw record and hydrate it into a GroupRecord.

    Returns:
        The typed record, or None if validation or field coercion fails.
    """
    record = validate_group_record(raw)
    if record is None:
        return None
    try:
        return GroupRecord.model_validate(record)
    except ValidationError:
        return None


def format_id_number(group_set_id: int) -> str:
    """Render the id_number of an autogroup belonging to a group set."""
    return f"{AUTOGROUP_MARKER}{int(group_set_id)}"


def parse_group_set_id(id_number: str) -> int | None:
    """Extract the group set id from an autogroup id_number.

    The id is the run of decimal digits between the marker and the next
    ``|`` (or the end of the string).

    Returns:
        The group set id, or None when the marker is missing or the id is
        not an integer >= 1.
    """
    if AUTOGROUP_MARKER not in id_number:
        return None

    suffix = id_number.split(AUTOGROUP_MARKER, 1)[1].split("|", 1)[0]
    if not _GROUP_SET_ID.fullmatch(suffix):
        return None

    group_set_id = int(suffix)
    if group_set_id < 1:
        return None
    return group_set_id
