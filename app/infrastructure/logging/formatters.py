"""Custom structlog processors.

Usage:
    from infrastructure.logging.formatters import add_app_info, mask_sensitive_data
"""

from typing import Any, Callable

Processor = Callable[[Any, str, dict[str, Any]], dict[str, Any]]

# Key fragments whose values never reach the log output
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "cookie",
        "bearer",
        # Slack incoming-webhook URLs embed their own credential
        "hook",
    }
)


def add_app_info(app_name: str, app_version: str = "unknown") -> Processor:
    """Create a processor that adds application name and version to entries.

    Example:
        configure_logging(extra_processors=[add_app_info("api", settings.GIT_SHA)])
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
) -> Processor:
    """Create a processor that masks values of sensitive keys.

    A key is sensitive when it contains one of the patterns, case-insensitive.
    None values are left untouched.

    Args:
        mask_value: Replacement for sensitive values.
        additional_patterns: Extra patterns to consider sensitive.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        masked = {}
        for key, value in event_dict.items():
            key_lower = key.lower()
            if value is not None and any(p in key_lower for p in patterns):
                masked[key] = mask_value
            else:
                masked[key] = value
        return masked

    return processor


def truncate_large_values(max_length: int = 500) -> Processor:
    """Create a processor that truncates string values longer than max_length."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor


def add_environment_info(environment: str) -> Processor:
    """Create a processor that adds the runtime environment name to entries."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["environment"] = environment
        return event_dict

    return processor
