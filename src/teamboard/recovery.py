class TeamboardError(Exception):
    """Base exception for board loading and writing."""
    pass

class RecoverableError(TeamboardError):
    """The board could not be read or written, but retrying may work."""
    pass

class FatalError(TeamboardError):
    """The request cannot succeed as given, e.g. an unsupported file format."""
    pass

class CorruptionError(FatalError):
    """A board or preferences file is undecodable, malformed or fails the board schema."""
    pass

class FileOperationError(RecoverableError):
    """A board file is missing or the filesystem refused a read or write."""
    pass
