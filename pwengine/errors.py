"""Exceptions raised by the password engine."""


class PasswordEngineError(Exception):
    """Generic password engine error."""


class InvalidPolicy(PasswordEngineError, ValueError):
    """The caller supplied a policy outside the supported domain."""


class GenerationExhausted(PasswordEngineError):
    """A retry ceiling was configured and no candidate passed validation."""
