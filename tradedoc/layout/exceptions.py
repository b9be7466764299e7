"""Layout exceptions.

Expected absence (missing fields, empty arrays, unknown compound shapes)
never raises. These exceptions cover documents whose shape cannot be
laid out at all and map to ErrorCode values in api_models.py:
- DocumentShapeError -> DOCUMENT_SHAPE_INVALID
"""


class LayoutError(Exception):
    """Base exception for trade document layout errors."""
    pass


class DocumentShapeError(LayoutError):
    """Document root or credential subject is not a key/value record.

    Maps to ErrorCode.DOCUMENT_SHAPE_INVALID.
    """

    code = "DOCUMENT_SHAPE_INVALID"
