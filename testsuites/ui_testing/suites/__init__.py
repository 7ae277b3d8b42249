"""
Registered acceptance suites.

Importing a module of this package registers its suite with
`testsuites.ui_testing.framework.harness.registry`; `harness.load_suites()`
imports them all.
"""
