"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Default file locations and named constants
- exceptions: Custom exception hierarchy
"""
