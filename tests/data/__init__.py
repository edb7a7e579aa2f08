"""
Test Data Package
================

Sample UI trees, components and the markup they are expected to render to.
"""

from .sample_trees import (
    ASYNC_PAGE_HTML,
    FORM_HTML,
    FORM_TREE,
    FRAGMENT_TREE,
    NAVIGATION_COMPACT_HTML,
    NAVIGATION_HTML,
    NAVIGATION_TREE,
    ItemList,
    Layout,
    Title,
    build_async_page,
    delayed,
)

__all__ = [
    'ASYNC_PAGE_HTML',
    'FORM_HTML',
    'FORM_TREE',
    'FRAGMENT_TREE',
    'NAVIGATION_COMPACT_HTML',
    'NAVIGATION_HTML',
    'NAVIGATION_TREE',
    'ItemList',
    'Layout',
    'Title',
    'build_async_page',
    'delayed',
]
