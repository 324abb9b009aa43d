"""Error logging service with PII and credential redaction."""

import logging
import re
import traceback
from typing import Any, Dict, Optional


class ErrorLoggingService:
    """Service for logging errors without leaking customer data or tokens."""

    # Patterns to redact from logs, applied in order
    PII_PATTERNS = {
        'email': (
            r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b',
            '[REDACTED_EMAIL]',
        ),
        'jwt': (
            r'\beyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*',
            '[REDACTED_JWT]',
        ),
        'password': (
            r'(password|passwd|pwd)["\']?\s*[:=]\s*["\']?([^"\'\s,}]+)',
            r'\1=[REDACTED_PASSWORD]',
        ),
        'token': (
            r'(token|jwt|bearer|authToken)["\']?\s*[:=\s]\s*["\']?([A-Za-z0-9._-]{20,})',
            r'\1=[REDACTED_TOKEN]',
        ),
    }

    @staticmethod
    def redact_pii(text: str) -> str:
        """
        Redact PII and credentials from text.

        Args:
            text: Text potentially containing PII

        Returns:
            Text with PII redacted
        """
        if not text:
            return text

        redacted = text
        for pattern, replacement in ErrorLoggingService.PII_PATTERNS.values():
            redacted = re.sub(pattern, replacement, redacted, flags=re.IGNORECASE)

        return redacted

    @staticmethod
    def log_error(
        logger: logging.Logger,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log error with PII redaction.

        Args:
            logger: Logger instance
            error: Exception to log
            context: Additional context (will be redacted)
        """
        error_traceback = ''.join(traceback.format_exception(
            type(error), error, error.__traceback__
        ))

        error_message = ErrorLoggingService.redact_pii(str(error))
        error_traceback = ErrorLoggingService.redact_pii(error_traceback)

        log_parts = [
            f"Error: {error_message}",
            f"Type: {type(error).__name__}",
        ]

        if context:
            safe_context = {
                k: ErrorLoggingService.redact_pii(str(v))
                for k, v in context.items()
            }
            log_parts.append(f"Context: {safe_context}")

        log_parts.append(f"Traceback:\n{error_traceback}")

        logger.error('\n'.join(log_parts))


# Global instance
error_logging_service = ErrorLoggingService()
