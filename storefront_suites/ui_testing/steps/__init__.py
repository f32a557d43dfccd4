"""
Step definitions for the storefront features.

The modules are registered as pytest plugins from the root ``conftest.py``
so every feature can use every step.
"""
