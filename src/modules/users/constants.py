"""User error messages, one per business rule."""

USER_NOT_FOUND_ID = "User not found with ID: "
USER_NAME_REQUIRED = "User name must not be empty."
USER_AGE_MUST_BE_POSITIVE = "User age must be a positive number."
USER_POSITION_REQUIRED = "User position must not be empty."
USER_HIRE_DATE_NOT_FUTURE = "Hire date cannot be in the future."
USER_NAME_EXISTS = "A user already exists with the name: "
