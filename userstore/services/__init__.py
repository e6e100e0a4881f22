"""
Use cases for userstore.

Each operation opens the backing file through the repository, applies its
rule and writes its result to the output sink. The CLI calls these
services instead of manipulating the JSON file itself.
"""
