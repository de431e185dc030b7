class InputError(ValueError):
    """A console response could not be turned into an answer."""


class ConfigError(ValueError):
    """The model config file is unreadable or inconsistent."""
