"""
Core modules for the water usage logger.

This package contains the week-boundary arithmetic and the reporting
engine that compares logged usage against baselines.
"""
