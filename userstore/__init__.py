"""
userstore: manage a list of user records kept as a JSON array in a file.

Layout mirrors the usual split:
- core: settings, error types
- domain: the User record and the typed commands built from CLI parameters
- repositories: how the JSON file is opened, read, decoded and rewritten
- services: the four operations (list, add, remove, findById)
"""

__version__ = "0.1.0"
