"""Card catalog crawler with an incremental two-tier JSON cache."""
