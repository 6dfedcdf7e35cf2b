"""Constants for Project model field names"""


class ProjectFields:
    """Field name constants for Project model"""
    ID = "id"
    NAME = "name"
    NAME_NORMALIZED = "name_normalized"  # lower-cased, trimmed copy used for uniqueness lookups
    OBJECTIVE = "objective"
    DESCRIPTION = "description"
    STATUS = "status"
    START_DATE = "start_date"
    END_DATE = "end_date"
    USER_ID = "user_id"
    IS_ACTIVE = "is_active"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
