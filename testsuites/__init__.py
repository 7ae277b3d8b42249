"""
Test suites package.

Keeps `testsuites` importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - suite discovery (`testsuites.ui_testing.suites`)
"""
