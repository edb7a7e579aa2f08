"""
Test Suite
==========

Test suite matching the jsxrender/ package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: Whole-tree rendering through the public entry point
"""
