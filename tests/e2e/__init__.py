"""
Browser scenarios for the activity search application.

Feature files under ``features/`` are bound to pytest tests by the
``test_*.py`` modules in this package; step definitions live in
``step_defs/`` and page objects in ``pages/``.
"""
