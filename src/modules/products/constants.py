"""Product error messages, one per business rule."""

PRODUCT_NOT_FOUND_ID = "Product not found with ID: "
PRODUCT_NAME_REQUIRED = "Product name must not be empty."
PRODUCT_QUANTITY_MUST_BE_POSITIVE = "Product quantity must be a positive integer."
PRODUCT_ENTRY_DATE_NOT_FUTURE = "Entry date cannot be in the future."
PRODUCT_NAME_EXISTS = "A product already exists with the name: "
REGISTERING_USER_REQUIRED = "The user registering the product must be specified."
MODIFYING_USER_REQUIRED = "The user modifying the product must be specified."
ONLY_REGISTERING_USER_CAN_DELETE = (
    "Only the user who registered the product can delete it."
)
EMPTY_SEARCH_FILTER = (
    "At least one search filter (entry date, user or product name) "
    "must be provided."
)
