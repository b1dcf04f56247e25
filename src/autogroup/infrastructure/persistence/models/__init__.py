"""SQLAlchemy models for the group and autogroup tables.

All models inherit from the Base class defined in database.py.
"""

from autogroup.infrastructure.persistence.models.autogroup_manual import AutogroupManualModel
from autogroup.infrastructure.persistence.models.autogroup_set import AutogroupSetModel
from autogroup.infrastructure.persistence.models.group import GroupModel
from autogroup.infrastructure.persistence.models.group_member import GroupMemberModel

__all__ = [
    "AutogroupManualModel",
    "AutogroupSetModel",
    "GroupMemberModel",
    "GroupModel",
]
