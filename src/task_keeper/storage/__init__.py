"""Key-value backends (in-memory, SQLite, directory of files)."""
