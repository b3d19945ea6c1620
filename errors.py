class PortfolioError(Exception):
    """Base class for errors raised by the portfolio services."""


class UnauthorizedError(PortfolioError):
    pass


class NotFoundError(PortfolioError, LookupError):
    pass


class ValidationFailedError(PortfolioError, ValueError):
    pass


class InvalidTemplateError(ValidationFailedError):
    def __init__(self, template_id: str) -> None:
        super().__init__(f"Unknown template: {template_id}")
        self.template_id = template_id


class ConflictError(PortfolioError):
    pass


class StoreFailure(PortfolioError, RuntimeError):
    """The document store could not complete an operation."""
