"""Infrastructure adapters: database, storage and record sources."""
