"""Create/edit form validation and server validation error mapping."""

import re
from dataclasses import dataclass
from datetime import datetime

from user_manager.domain.entities.user import Location, UserDetail
from user_manager.domain.value_objects.operation_result import Error
from user_manager.shared.errors import error_message

VALID_TITLES = frozenset({"mr", "ms", "mrs", "miss"})
VALID_GENDERS = frozenset({"male", "female"})

EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+$"
)
PHONE_PATTERN = re.compile(r"^\d{10,}$", re.ASCII)
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)

SERVER_VALIDATION_MARKERS = ("BODY_NOT_VALID", "Invalid user data")
SERVER_FIELD_MESSAGES = (
    ("email", "This email address is invalid or already in use."),
    ("gender", "Please select a valid gender."),
    ("lastName", "Please enter a valid last name."),
)
GENERIC_VALIDATION_MESSAGE = "Some of the information entered is not valid. Please review the form."


@dataclass
class UserForm:
    """Raw field values of the create/edit form."""
    title: str = ""
    first_name: str = ""
    last_name: str = ""
    gender: str = ""
    email: str = ""
    date_of_birth: str = ""
    phone: str = ""
    picture: str = ""
    location: Location | None = None

    @classmethod
    def from_user(cls, user: UserDetail) -> "UserForm":
        """Pre-fill the form from an existing record."""
        return cls(
            title=user.title,
            first_name=user.first_name,
            last_name=user.last_name,
            gender=user.gender,
            email=user.email,
            date_of_birth=user.date_of_birth[:10],
            phone=user.phone,
            picture=user.picture,
            location=user.location,
        )

    def normalized(self) -> "UserForm":
        """Trimmed copy with lower-cased title and gender."""
        return UserForm(
            title=self.title.strip().lower(),
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            gender=self.gender.strip().lower(),
            email=self.email.strip(),
            date_of_birth=self.date_of_birth.strip(),
            phone=self.phone.strip(),
            picture=self.picture.strip(),
            location=self.location,
        )


def _is_strict_date(value: str) -> bool:
    if not DATE_PATTERN.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def _check_name(value: str, label: str) -> str | None:
    if not value.strip():
        return f"{label} is required"
    if len(value.strip()) < 2:
        return f"{label} must be at least 2 characters"
    return None


def validate_user_form(form: UserForm) -> str | None:
    """Return the message of the first violated rule, or ``None``.

    Fields are checked in form order: title, first name, last name, gender,
    email, date of birth, phone.
    """
    title = form.title.strip()
    if not title:
        return "Title is required"
    if title.lower() not in VALID_TITLES:
        return "Please select a valid title"

    for value, label in ((form.first_name, "First name"), (form.last_name, "Last name")):
        message = _check_name(value, label)
        if message:
            return message

    gender = form.gender.strip()
    if not gender:
        return "Gender is required"
    if gender.lower() not in VALID_GENDERS:
        return "Please select a valid gender"

    email = form.email.strip()
    if not email:
        return "Email is required"
    if not EMAIL_PATTERN.match(email):
        return "Please enter a valid email address"

    date_of_birth = form.date_of_birth.strip()
    if not date_of_birth:
        return "Date of birth is required"
    if not _is_strict_date(date_of_birth):
        return "Date of birth must be in YYYY-MM-DD format"

    phone = form.phone.strip()
    if not phone:
        return "Phone number is required"
    if not PHONE_PATTERN.match(phone):
        return "Phone number must contain at least 10 digits"

    return None


def is_server_validation_error(message: str) -> bool:
    return any(marker in message for marker in SERVER_VALIDATION_MARKERS)


def submission_error_message(error: Error) -> str:
    """User-facing message for a failed create/update submission."""
    if error.code == "BODY_NOT_VALID" or is_server_validation_error(error.message):
        # Field details reported by the server follow "BODY_NOT_VALID:"
        _, marker, details = error.message.partition("BODY_NOT_VALID:")
        haystack = details if marker else error.message
        for needle, message in SERVER_FIELD_MESSAGES:
            if needle in haystack:
                return message
        return GENERIC_VALIDATION_MESSAGE
    return error_message(error)
