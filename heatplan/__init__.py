"""Heating plan monitoring.

This package checks observed room temperature ranges against the allowed
range of a heating plan and turns violations into human-readable alerts.
"""
