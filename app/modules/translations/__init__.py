# modules/translations/__init__.py
"""Translation administration module.

Admin endpoints for editing translation records in the store. Every write is
followed by cache invalidation for the affected locales so the next render
rebuilds the merged message tree.
"""
