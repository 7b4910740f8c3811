import re


def redact_secrets(text: str) -> str:
    """Redact API keys and tokens from log lines and error strings."""
    if not isinstance(text, str):
        return text

    redacted = re.sub(r"(?i)(api[_-]?key|key|token|secret)=([^&\s]+)", r"\1=***REDACTED***", text)
    redacted = re.sub(r"(?i)(x-api-key['\"]?\s*[:=]\s*['\"]?)[A-Za-z0-9._\-]+", r"\1***REDACTED***", redacted)
    redacted = re.sub(r"(?i)Bearer\s+[A-Za-z0-9._\-]+", "Bearer ***REDACTED***", redacted)
    return redacted
