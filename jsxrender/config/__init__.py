"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Library settings and default render options
- logging: Structured logging configuration
"""
