"""
================================================================================
Root Pytest Configuration
================================================================================

Registers project-wide markers and tags collected tests by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Live browser tests against an AEM instance"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests of the framework and suite definitions"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add 'ui' / 'unit' markers based on the test's directory."""
    for item in items:
        if "ui_testing" in item.path.parts:
            item.add_marker(pytest.mark.ui)

        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "We.Retail UI Acceptance Suites",
        "=" * 60,
        "",
    ]
