"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories bind domain model fields as statement parameters; user input
never becomes part of the SQL text.
"""
