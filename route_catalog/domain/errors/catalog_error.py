"""Handler catalog error constants.

Defines catalog-specific error messages used when descriptors, annotations,
or query arguments are malformed.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used as messages for InvalidArgumentError / ValueError
    - Used in Result types for data errors (NotFoundError, ConversionError)

Usage:
    from route_catalog.domain.errors import CatalogError
    from route_catalog.core.errors import InvalidArgumentError

    if policy_name is None:
        raise InvalidArgumentError("policy_name", CatalogError.POLICY_NAME_REQUIRED)
"""


class CatalogError:
    """Catalog error constants.

    Error Categories:
        - Input errors: DESCRIPTORS_REQUIRED, DESCRIPTOR_REQUIRED, ...
        - Annotation errors: INVALID_DISPLAY_NAME, INVALID_AREA_NAME
        - Consistency errors: ACTION_GROUP_MISMATCH, DUPLICATE_ACTION_ID
        - Lookup errors: GROUP_NOT_FOUND
    """

    # -------------------------------------------------------------------------
    # Input Errors
    # -------------------------------------------------------------------------

    SOURCE_REQUIRED = "Descriptor source cannot be None"
    """The discovery service needs a descriptor source to build from."""

    DESCRIPTORS_REQUIRED = "Descriptor sequence cannot be None"
    """An empty sequence is valid; None is not."""

    DESCRIPTOR_REQUIRED = "Descriptor cannot be None"

    GROUP_NAME_REQUIRED = "Descriptor group name cannot be empty"

    ACTION_NAME_REQUIRED = "Descriptor action name cannot be empty"

    METADATA_REQUIRED = "Descriptor group and action metadata cannot be None"

    POLICY_NAME_REQUIRED = "Policy name cannot be None"
    """Empty string is a valid (literal) policy name; None is not."""

    # -------------------------------------------------------------------------
    # Annotation Errors
    # -------------------------------------------------------------------------

    INVALID_DISPLAY_NAME = "Display name cannot be empty"

    INVALID_AREA_NAME = "Area name cannot be empty"

    INVALID_ANNOTATION_KIND = "Annotation kind cannot be empty"

    # -------------------------------------------------------------------------
    # Consistency Errors
    # -------------------------------------------------------------------------

    DUPLICATE_ACTION_ID = "Duplicate action in handler group"

    ACTION_GROUP_MISMATCH = "Action does not reference its owning handler group"

    # -------------------------------------------------------------------------
    # Lookup Errors
    # -------------------------------------------------------------------------

    GROUP_NOT_FOUND = "Handler group not found"
