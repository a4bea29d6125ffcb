"""Integration tests.

Purpose
- Exercise real file loading and import resolution through the adapters and
  the composition root.

Guidelines
- Write documents under ``tmp_path``; never depend on the working directory.
- Minimize mocking; use the importable fakes in ``tests.fixtures.services``.
"""
