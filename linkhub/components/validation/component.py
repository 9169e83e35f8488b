"""
Validation component - URL checks and document shape checks.

Functional Core - pure functions, no I/O.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from .models import LinkValidationIssue


def _hostname(value: str) -> str | None:
    try:
        parts = urlsplit(value)
        # Accessing hostname/port validates bracketed hosts and port numbers
        host = parts.hostname
        _ = parts.port
    except ValueError:
        return None
    if not parts.scheme or not host or any(c.isspace() for c in host):
        return None
    return host


def is_well_formed_url(value: Any) -> bool:
    """Return True iff value is an absolute URL with a scheme and a host."""
    if not isinstance(value, str) or not value.strip():
        return False
    return _hostname(value.strip()) is not None


def extract_domain(url: Any) -> str:
    """
    Host of url with one leading "www." removed.

    Returns "" when url is not well formed. Used for icon lookup and
    display only.
    """
    if not is_well_formed_url(url):
        return ""
    host = _hostname(url.strip()) or ""
    return host.removeprefix("www.")


def format_url_for_display(url: Any) -> str:
    """Short form shown under a link title: the domain, or the raw text."""
    domain = extract_domain(url)
    if domain:
        return domain
    return url if isinstance(url, str) else ""


def is_importable_document(doc: Any) -> bool:
    """
    Check the top-level shape of an imported document.

    Requires a mapping with a non-null "profile" and a "links" list.
    Individual links are not checked; malformed entries are rendered
    defensively instead.
    """
    if not isinstance(doc, Mapping):
        return False
    if doc.get("profile") is None:
        return False
    return isinstance(doc.get("links"), list)


def validate_link_data(title: str, url: str) -> list[LinkValidationIssue]:
    """Validate new link input. Callers strip whitespace first."""
    issues: list[LinkValidationIssue] = []

    if not title:
        issues.append(
            LinkValidationIssue(
                code="title_required",
                message="Please fill in both title and URL",
                field="title",
            )
        )

    if not url:
        issues.append(
            LinkValidationIssue(
                code="url_required",
                message="Please fill in both title and URL",
                field="url",
            )
        )
    elif not is_well_formed_url(url):
        issues.append(
            LinkValidationIssue(
                code="url_invalid",
                message="Please enter a valid URL",
                field="url",
            )
        )

    return issues
