"""
Trade document layout configuration constants.

Constants are organized into:
- FORMATTING: Fixed label/title tables used by the layout core
- POLICY: Implementation limits for degraded handling of unusual input
- OPERATIONAL: Deployment-specific settings (env vars)
"""

import os
from types import MappingProxyType
from typing import Mapping, Tuple

# =============================================================================
# FORMATTING CONSTANTS
# =============================================================================

# Whole-word abbreviations applied after camelCase splitting.
# Keys are matched case-insensitively against the spaced label.
DEFAULT_ABBREVIATIONS: Mapping[str, str] = MappingProxyType({
    "id": "ID",
    "sku": "SKU",
    "url": "URL",
    "uri": "URI",
    "un": "UN",
})

# Root-level credential fields surfaced in the verification panel.
# (source key, output key), in display order.
VERIFICATION_FIELD_MAP: Tuple[Tuple[str, str], ...] = (
    ("id", "id"),
    ("issuer", "issuer"),
    ("validFrom", "issuanceDate"),
    ("validTo", "expirationDate"),
)

# Keys checked (in order) for the credential subject holding the trade data
SUBJECT_KEYS: Tuple[str, ...] = ("credentialSubject", "subject")

# Type tag shared by every verifiable credential; never used as a title
GENERIC_CREDENTIAL_TYPE: str = "VerifiableCredential"
DEFAULT_DOCUMENT_TITLE: str = "Trade Document"

# Object field whose value overrides the panel title (e.g. "Buyer", "Seller")
PANEL_TITLE_FIELD: str = "type"

VERIFICATION_PANEL_TITLE: str = "Document Verification"
CLAIMS_PANEL_TITLE: str = "Claims"

# =============================================================================
# POLICY CONSTANTS
# =============================================================================

# Maximum nesting depth the flattener descends before degrading a branch
# to its serialized form. Parsed JSON is acyclic, this only bounds recursion.
MAX_FLATTEN_DEPTH: int = int(os.getenv("TRADEDOC_MAX_FLATTEN_DEPTH", "32"))

# Maximum nesting depth written out when a value falls back to its
# serialized form. Deeper containers are replaced with "{...}" / "[...]".
MAX_SERIALIZE_DEPTH: int = int(os.getenv("TRADEDOC_MAX_SERIALIZE_DEPTH", "32"))

# =============================================================================
# OPERATIONAL CONFIGURATION
# =============================================================================

SERVICE_NAME: str = "trade-doc-layout"
SERVICE_VERSION: str = os.getenv("TRADEDOC_VERSION", "0.1.0")

LOG_LEVEL_ENV: str = "TRADEDOC_LOG_LEVEL"
LOG_FILE_ENV: str = "TRADEDOC_LOG_FILE"
