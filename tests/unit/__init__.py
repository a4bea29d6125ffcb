"""Unit tests.

Purpose
- Verify the bootstrap sequencer, its validation and locator helpers, the
  in-memory adapters and the CLI helpers in isolation.

Guidelines
- No real I/O; services and locators are the fakes in `tests.fixtures.services`.
- Assert on the order of bootstrap calls and on error codes and causes,
  not on private helpers.
"""
