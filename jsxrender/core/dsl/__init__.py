"""
Tree Construction Module
=======================

Helpers for assembling element descriptors.

Components:
- builder: ``h`` helper and the ``Fragment`` marker
"""
