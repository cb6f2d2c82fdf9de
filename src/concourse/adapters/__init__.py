"""Adapters for CONCOURSE.

Capability adapters are the only code allowed to know both sides of a module
boundary: each implements an interface declared by a consumer module by
forwarding to a provider owned by another module. This package also holds
concrete implementations of the shared kernel's ports (ID generators).

Dependency rule: may import `concourse.interfaces` and the consumer/provider
modules it bridges; nothing but `concourse.bootstrap` imports this package.
"""
