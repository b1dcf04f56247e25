"""Hook event definitions.

These are the events triggered by the group mutation primitives. Adding
new events is allowed (non-breaking), but removing or renaming events is
a breaking change for registered hooks.
"""


class GroupEvent:
    """Hook event names for group operations.

    All events are fired after the change has been flushed to the
    session, so hooks observe the new state.
    """

    ON_GROUP_AFTER_CREATE = "on_group_after_create"
    ON_GROUP_AFTER_UPDATE = "on_group_after_update"
    ON_GROUP_AFTER_DELETE = "on_group_after_delete"
    ON_GROUP_MEMBER_ADDED = "on_group_member_added"
    ON_GROUP_MEMBER_REMOVED = "on_group_member_removed"
