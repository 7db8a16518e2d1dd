"""Domain-specific exceptions."""


class AslanException(Exception):
    """Base exception for all aslan domain errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RequestValidationError(AslanException):
    """Raised by ``validate()`` for the first missing or invalid request field."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, details={"field": field})
        self.field = field


class ContainerNotFound(AslanException):
    """Raised when a service has no container with the requested name."""

    def __init__(
        self,
        service_name: str,
        container: str,
        env_name: str | None = None,
        product_name: str | None = None,
    ):
        super().__init__(
            f"serviceName:{service_name},container:{container}",
            details={
                "service_name": service_name,
                "container": container,
                "env_name": env_name,
                "product_name": product_name,
            },
        )
        self.service_name = service_name
        self.container = container
        self.env_name = env_name
        self.product_name = product_name
