"""Test helper modules for the template helper suite.

- memory_app: in-memory host app (views, collections, pybars rendering)
"""
