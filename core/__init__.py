# core/__init__.py
"""
Core value types and exceptions for the DMS toolkit.
"""
