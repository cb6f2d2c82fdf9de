"""Entrypoints (inbound adapters) for CONCOURSE.

Expose the application to the outside world. Entry points build the
application through `concourse.bootstrap`, call consumer operations, and
present the results.

Dependency rule: may import `concourse.bootstrap`, `concourse.config`,
`concourse.logging`, `concourse.boundaries` and `concourse.interfaces`;
never feature modules or adapters directly.
"""
