from collections.abc import Callable


# Existence oracle used by the name allocator: short name -> artifact exists?
type ExistsCheck = Callable[[str], bool]

# Raw git object id (40 hex characters as bytes)
type ObjectId = bytes
