"""Core type definitions."""

from typing import NewType

# Repository document id (e.g., "VQ_hV31Za5EAy02H")
DocumentId = NewType("DocumentId", str)
