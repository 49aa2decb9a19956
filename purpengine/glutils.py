"""Readable names for OpenGL debug-output enums and message formatting."""

from __future__ import annotations

from typing import Optional

DEBUG_SOURCE_API = 0x8246
DEBUG_SOURCE_WINDOW_SYSTEM = 0x8247
DEBUG_SOURCE_SHADER_COMPILER = 0x8248
DEBUG_SOURCE_THIRD_PARTY = 0x8249
DEBUG_SOURCE_APPLICATION = 0x824A
DEBUG_SOURCE_OTHER = 0x824B

DEBUG_TYPE_ERROR = 0x824C
DEBUG_TYPE_DEPRECATED_BEHAVIOR = 0x824D
DEBUG_TYPE_UNDEFINED_BEHAVIOR = 0x824E
DEBUG_TYPE_PORTABILITY = 0x824F
DEBUG_TYPE_PERFORMANCE = 0x8250
DEBUG_TYPE_OTHER = 0x8251
DEBUG_TYPE_MARKER = 0x8268

DEBUG_SEVERITY_HIGH = 0x9146
DEBUG_SEVERITY_MEDIUM = 0x9147
DEBUG_SEVERITY_LOW = 0x9148
DEBUG_SEVERITY_NOTIFICATION = 0x826B

_UNKNOWN = "UNKNOWN"

_SOURCE_NAMES = {
    DEBUG_SOURCE_API: "API",
    DEBUG_SOURCE_WINDOW_SYSTEM: "WINDOW SYSTEM",
    DEBUG_SOURCE_SHADER_COMPILER: "SHADER COMPILER",
    DEBUG_SOURCE_THIRD_PARTY: "THIRD PARTY",
    DEBUG_SOURCE_APPLICATION: "APPLICATION",
}

_TYPE_NAMES = {
    DEBUG_TYPE_ERROR: "ERROR",
    DEBUG_TYPE_DEPRECATED_BEHAVIOR: "DEPRECATED BEHAVIOR",
    DEBUG_TYPE_UNDEFINED_BEHAVIOR: "UDEFINED BEHAVIOR",
    DEBUG_TYPE_PORTABILITY: "PORTABILITY",
    DEBUG_TYPE_PERFORMANCE: "PERFORMANCE",
    DEBUG_TYPE_OTHER: "OTHER",
    DEBUG_TYPE_MARKER: "MARKER",
}

_SEVERITY_NAMES = {
    DEBUG_SEVERITY_HIGH: "HIGH",
    DEBUG_SEVERITY_MEDIUM: "MEDIUM",
    DEBUG_SEVERITY_LOW: "LOW",
    DEBUG_SEVERITY_NOTIFICATION: "NOTIFICATION",
}

_REPORTED_SEVERITIES = frozenset({DEBUG_SEVERITY_MEDIUM, DEBUG_SEVERITY_HIGH})


def debug_source_to_string(source: int) -> str:
    """Name of a debug message source; ``OTHER`` and unknown values give ``UNKNOWN``."""
    return _SOURCE_NAMES.get(source, _UNKNOWN)


def debug_type_to_string(type_: int) -> str:
    """Name of a debug message type."""
    return _TYPE_NAMES.get(type_, _UNKNOWN)


def debug_severity_to_string(severity: int) -> str:
    """Name of a debug message severity."""
    return _SEVERITY_NAMES.get(severity, _UNKNOWN)


def format_debug_message(
    source: int, type_: int, message_id: int, severity: int, message: str
) -> Optional[str]:
    """Format a debug message, or return None if its severity is below medium."""
    if severity not in _REPORTED_SEVERITIES:
        return None
    return (
        f"[OpenGL] [{debug_severity_to_string(severity)} - "
        f"{debug_type_to_string(type_)} ({message_id})]: "
        f"[{debug_source_to_string(source)}] {message}"
    )