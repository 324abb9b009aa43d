"""Logging utilities for PII redaction."""

import hashlib
from typing import Optional


def redact_email(email: Optional[str]) -> str:
    """
    Redact a customer email for logging while keeping log lines correlatable.

    Examples:
        >>> redact_email("shopper@example.com")
        's***@example.com'
        >>> redact_email(None)
        'N/A'
    """
    if not email:
        return "N/A"

    try:
        local, domain = email.split("@", 1)
    except ValueError:
        # Not an email at all - hash it
        return f"hash:{hashlib.sha256(email.encode()).hexdigest()[:6]}"

    # Short local parts would be identifiable from one character
    if len(local) < 3:
        return f"hash:{hashlib.sha256(email.encode()).hexdigest()[:6]}@{domain}"

    return f"{local[0]}***@{domain}"
