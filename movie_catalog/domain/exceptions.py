class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class ConflictError(DomainError):
    pass


class RepositoryError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass
