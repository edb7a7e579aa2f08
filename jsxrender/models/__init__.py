"""
Data Models
===========

Pydantic data models for UI trees and render options.

Models:
- schemas: Element descriptors, node classification and render options
"""
