"""Core NWL components: document model, loading, naming, errors."""
