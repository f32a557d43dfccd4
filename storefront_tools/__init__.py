"""
================================================================================
Storefront Tools
================================================================================

Support tooling shared by the storefront automation suites.

Packages:
    - common: Loguru logging setup
    - report_tools: Allure attachment helpers and report generation
    - preflight: Target site reachability check run before UI suites

Author: Automation Team
License: MIT
================================================================================
"""
