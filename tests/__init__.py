"""
shipwatch test suite.

Tests are organized by layer:
    tests/unit/         Unit tests (flag store, parser, secrets, aliases, env sync)
    tests/integration/  Startup sequence and CLI commands via CliRunner

Run all tests:
    pytest

Run unit tests only:
    pytest tests/unit/
"""
