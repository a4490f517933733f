class ResolutionError(LookupError):
    """Entity metadata (link field, backend table) could not be resolved."""
