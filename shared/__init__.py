"""Helpers shared by the unit, smoke, UI and E2E suites."""
