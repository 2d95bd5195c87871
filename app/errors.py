"""Domain errors raised by the catalog and mapped to HTTP statuses by the routes."""


class CatalogError(Exception):
    """Base class for every catalog failure."""


class StringAlreadyExists(CatalogError):
    def __init__(self, string_id: str):
        self.string_id = string_id
        super().__init__("String already exists in the system")


class StringNotFound(CatalogError):
    def __init__(self, value: str):
        self.value = value
        super().__init__("String does not exist in the system")


class UnparseableQuery(CatalogError):
    def __init__(self, query: str):
        self.query = query
        super().__init__("Unable to parse natural language query")


class InvalidFilter(CatalogError):
    def __init__(self, message: str):
        super().__init__(message)
