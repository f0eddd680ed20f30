import enum
import typing

EMAIL_MAX_LENGTH: typing.Final[int] = 254
NAME_MAX_LENGTH: typing.Final[int] = 100
NAME_MIN_LENGTH: typing.Final[int] = 1
PASSWORD_MIN_LENGTH: typing.Final[int] = 8
# bcrypt ignores everything past the first 72 bytes of input
PASSWORD_MAX_BYTES: typing.Final[int] = 72
ROLE_NAME_MAX_LENGTH: typing.Final[int] = 50
PERMISSION_NAME_MAX_LENGTH: typing.Final[int] = 100


class SortOrder(str, enum.Enum):
    ASCENDING = "ASC"
    DESCENDING = "DESC"


class UserSortKey(str, enum.Enum):
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
