"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    CPF = "cpf"
    BIRTH_DATE = "birth_date"
    PASSWORD_HASH = "password_hash"
    IS_EMAIL_VERIFIED = "is_email_verified"
    IS_FIRST_ACCESS = "is_first_access"
    IS_ACTIVE = "is_active"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
