"""
Storefront test suites package.

Kept importable so ``run_tests.py`` and the root ``conftest.py`` can register
hooks and step modules by dotted path.
"""
