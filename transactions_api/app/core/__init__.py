"""Settings, logging setup and the SQLite store."""
