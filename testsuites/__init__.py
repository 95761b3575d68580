"""
Test suites package.

Kept importable so unit tests can share the fake browser and layout maps
defined in `testsuites.unit.conftest`, and so `run_tests.py` can address
suites by path.
"""
