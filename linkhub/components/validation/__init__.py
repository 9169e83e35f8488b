"""
Validation component - URL well-formedness, domain extraction and
import document shape checks.
"""

from .component import (
    extract_domain,
    format_url_for_display,
    is_importable_document,
    is_well_formed_url,
    validate_link_data,
)
from .models import LinkValidationIssue

__all__ = [
    "is_well_formed_url",
    "extract_domain",
    "format_url_for_display",
    "is_importable_document",
    "validate_link_data",
    "LinkValidationIssue",
]
