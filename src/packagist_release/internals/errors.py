class PackagistError(Exception):
    """Base class for every failure reported by packagist-release."""

    default_message = "packagist error"

    def __init__(self, pretty_message: str | None = None):
        self.pretty_message = pretty_message or self.default_message
        super().__init__(self.pretty_message)


class NotFound(PackagistError):
    """
    A logical absence: the package, or a release of it, does not exist.
    Retrying will not change the answer.
    """

    default_message = "not found"


class NoReleasedVersion(NotFound):
    default_message = "no released version found"


class InvalidVersion(NotFound):
    default_message = "invalid version"


class RegistryError(PackagistError):
    """The registry could not be reached or answered with unexpected data."""

    default_message = "registry error"
