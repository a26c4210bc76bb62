"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for its tables.
Rows are returned as plain dicts keyed by column name.
"""
