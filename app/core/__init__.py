"""
Core infrastructure for the Simile Board service.
Provides database sessions, exceptions, error handlers and logging setup.
"""
