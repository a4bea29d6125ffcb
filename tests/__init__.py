"""service-bootstrap test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real files and imports wired through adapters and `wiring`.
- e2e/          : The `service-bootstrap` CLI driven through Click's CliRunner.
- fixtures/     : Shared fake services and importable locators (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); use the fakes in fixtures/.
- Coroutine tests use ``@pytest.mark.asyncio``.
- Suite markers (unit, integration, e2e) are added by directory in conftest.py.
"""
