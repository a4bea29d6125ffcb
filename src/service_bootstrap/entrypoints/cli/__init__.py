"""Command-line interface for service-bootstrap."""
