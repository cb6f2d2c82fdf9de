"""CONCOURSE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior enforced across every implementation of an interface.
- integration/  : The composed application: bootstrap, wiring and cross-module flows.
- e2e/          : The command line, invoked through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic; stand in for capabilities with a
  subclass of the interface or an autospec mock of it.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
