"""Contract tests.

Purpose
- Define behavior once and run it against every implementation of an
  interface (ID generators, capability implementations) to keep them
  interchangeable.
"""
