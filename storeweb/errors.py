"""Browse failures. Every kind is served as a plain 404."""
from __future__ import annotations

class BrowseError(Exception):
    kind = "browse_error"

class NotRegistered(BrowseError):
    kind = "not_registered"

class IterationFailure(BrowseError):
    kind = "iteration_failure"

class KeyAbsent(BrowseError):
    kind = "key_absent"

class FetchFailure(BrowseError):
    kind = "fetch_failure"

class MalformedPath(BrowseError):
    kind = "malformed_path"
