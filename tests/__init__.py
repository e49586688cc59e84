"""
Test Suite for Offline Ledger.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Full client against a scripted transport
    - fixtures/: Sample configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
