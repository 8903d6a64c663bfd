"""Errors raised while configuring and wiring the application."""


class UtilError(Exception):
    """Base for failures outside the domain and persistence layers."""


class ConfigurationError(UtilError):
    """A setting is unusable in the current environment."""

    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        self.reason = reason
        super().__init__(f"{setting}: {reason}")


class DependencyInjectionError(UtilError):
    """A component could not be resolved to a provider."""

    def __init__(self, component: str, reason: str) -> None:
        self.component = component
        self.reason = reason
        super().__init__(f"{component}: {reason}")
