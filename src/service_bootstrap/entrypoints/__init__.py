"""Entrypoints (inbound adapters) for service-bootstrap.

Expose the bootstrap core to the outside world (currently the CLI). Parse and
validate inputs, assemble collaborators through `service_bootstrap.wiring`,
run the bootstrap, and present results.

Dependency rule: may import `service_bootstrap.service_layer` and
`service_bootstrap.wiring`; avoid importing `service_bootstrap.adapters` beyond
their error types.
"""
