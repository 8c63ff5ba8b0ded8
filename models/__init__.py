"""
models/ - Domain Models
=======================
Plain dataclasses that represent rows of the database.
"""
