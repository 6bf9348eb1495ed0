def exact_match(query: bytes, target: bytes) -> bool:
    """Whole-document equality."""
    if len(query) != len(target):
        return False
    return query == target
