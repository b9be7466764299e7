"""Top-level field classification.

Splits a credential document into verification metadata, scalar claims,
and the ordered list of object/array fields. Only the first level of the
subject is inspected; nested structure is left to the flattener.
"""

from typing import Any, Dict, List, Mapping, Optional

from tradedoc.core.config import SUBJECT_KEYS, VERIFICATION_FIELD_MAP
from tradedoc.layout.exceptions import DocumentShapeError
from tradedoc.layout.models import Classification, ComplexField, FieldKind


def get_subject(document: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    """Return the credential subject, or None if the document has none.

    Raises:
        DocumentShapeError: If a subject is present but is not a record.
    """
    for key in SUBJECT_KEYS:
        subject = document.get(key)
        if subject is None:
            continue
        if not isinstance(subject, Mapping):
            raise DocumentShapeError(
                f"'{key}' must be an object, got {type(subject).__name__}"
            )
        return subject
    return None


def _extract_verification(document: Mapping[str, Any]) -> Dict[str, Any]:
    verification: Dict[str, Any] = {}
    for source_key, target_key in VERIFICATION_FIELD_MAP:
        value = document.get(source_key)
        if value is None or value == "":
            continue
        verification[target_key] = value
    return verification


def classify(document: Mapping[str, Any]) -> Classification:
    """Split a document into verification, simple, and complex fields.

    Subject fields keep their document order within each category.
    None values are dropped; lists become ARRAY fields, records become
    OBJECT fields, and every other value is a simple claim.

    Args:
        document: Parsed credential document.

    Returns:
        Classification of the document's fields.

    Raises:
        DocumentShapeError: If the document or its subject is not a record.
    """
    if not isinstance(document, Mapping):
        raise DocumentShapeError(
            f"document must be an object, got {type(document).__name__}"
        )

    verification = _extract_verification(document)
    subject = get_subject(document)
    if subject is None:
        return Classification(verification=verification)

    simple_fields: Dict[str, Any] = {}
    complex_fields: List[ComplexField] = []

    for key, value in subject.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            complex_fields.append(ComplexField(key=key, kind=FieldKind.ARRAY, value=value))
        elif isinstance(value, Mapping):
            complex_fields.append(ComplexField(key=key, kind=FieldKind.OBJECT, value=value))
        else:
            simple_fields[key] = value

    return Classification(
        verification=verification,
        simple_fields=simple_fields,
        complex_fields=tuple(complex_fields),
    )
