"""Diagnostics, errors, and source configuration shared by every interface."""

from smufl.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from smufl.core.exceptions import ConfigError, MetadataDecodeError, SmuflError


__all__ = [
    "ConfigError",
    "DiagnosticEmitter",
    "LoggingEmitter",
    "MetadataDecodeError",
    "NullEmitter",
    "SmuflError",
]
