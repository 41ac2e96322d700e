"""
db/ - Database Layer
====================
Handles the MariaDB connection pool, the startup health check and schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
