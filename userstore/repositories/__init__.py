"""
Persistence adapters.

Today the only backend is a single JSON file holding the whole collection.
Services depend on UserFileRepository rather than touching the file directly.
"""
