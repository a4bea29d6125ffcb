"""Helpers for the service-bootstrap CLI."""

from .messages import error, report_bootstrap_error, success, warn

__all__ = ["error", "report_bootstrap_error", "success", "warn"]
