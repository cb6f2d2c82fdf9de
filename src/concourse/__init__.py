"""CONCOURSE

Capability-mediated composition for independently developed airline booking
modules. Consumers declare the capabilities they need as interfaces, providers
implement the work, and a single composition root wires the two through small
adapters so that no module depends on another module's concrete code.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
