from typing import Any


# Type aliases for Python dictionaries
type StoreConfiguration = dict[str, Any]
type BackendConfiguration = dict[str, Any]
