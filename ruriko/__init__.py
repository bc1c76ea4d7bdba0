"""Shared utilities: secret encryption, environment configuration, redaction, retry, tracing and version info."""

__version__ = "0.1.0"

__all__ = ["crypto", "environment", "redact", "retry", "trace", "version"]