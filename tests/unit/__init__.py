"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Consumers are tested against stub capabilities, never real providers.
- Keep tests small, fast, and deterministic.
"""
