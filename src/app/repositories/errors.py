class DuplicateEntryError(Exception):
    """A write violated a uniqueness constraint."""
