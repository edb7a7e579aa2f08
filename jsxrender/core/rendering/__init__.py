"""
Rendering Module
===============

Component resolution and HTML generation.

Components:
- entities: Entity escaping and attribute serialization
- tags: Tag and node classifiers
- resolver: Asynchronous component expansion
- html_generator: HTML serialization and the render entry point
"""
