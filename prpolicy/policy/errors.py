"""Policy bot exceptions."""


class PolicyError(Exception):
    """Base class for policy bot errors."""

    pass


class MissingPullRequestError(PolicyError):
    """Raised when a trigger does not refer to a pull request."""

    pass
