"""Integration tests.

Purpose
- Exercise the application as composed by `concourse.bootstrap`, with real
  providers and adapters wired together.
"""
