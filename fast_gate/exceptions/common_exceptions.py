from typing import Any


class InvalidAbilityException(ValueError):
    def __init__(self, ability: Any):
        super().__init__(f"Ability name must be a non-empty string, got {ability!r}")
        self.ability = ability

class InvalidPolicyException(TypeError):
    def __init__(self, subject_type: Any):
        super().__init__(
            f"Policies can only be registered against a class usable in isinstance/issubclass checks, got {subject_type!r}"
        )
        self.subject_type = subject_type

class EnvInvalidException(ValueError):
    def __init__(self, env_name: str, value: str = None, supported_values: list[str] = None):
        message = f"[ENV INVALID] Invalid environment variable: `{env_name}`"
        if value:
            message += f" (value: `{value}`) "
        if supported_values:
            message += f" (supported values: {', '.join(supported_values)})"
        super().__init__(message)
