"""Exceptions raised while assembling and using the view renderer."""


class ViewRenderError(Exception):
    """Base class for all view renderer errors."""

    pass


class MissingHelperError(ViewRenderError):
    """Raised when a view helper cannot be created because its upstream service is absent."""

    def __init__(self, service: str, helper: str):
        self.service = service
        self.helper = helper
        super().__init__(f'An instance of {service} is required in order to create the "{helper}" view helper; not found')


class HelperNotFoundError(ViewRenderError, KeyError):
    """Raised when a helper name is not registered in the helper registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"View helper {name!r} is not registered")

    def __str__(self):
        return str(self.args[0])


class ServiceNotFoundError(ViewRenderError, KeyError):
    """Raised by the container for unknown service ids."""

    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Service {service!r} is not registered")

    def __str__(self):
        return str(self.args[0])
