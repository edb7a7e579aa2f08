"""
Core Logic
==========

Core modules for building, resolving and rendering UI trees.

Modules:
- dsl: Tree construction helpers
- rendering: Component resolution and HTML serialization
"""
