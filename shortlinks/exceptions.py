class ShortLinksError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortlinks_error'


class GenerationExhaustedError(ShortLinksError):
    """Raised when every shortcode candidate of a save() call collided."""

    error_code = 'app:generation_exhausted_error'

    def __init__(self, attempts: int):
        super().__init__(f'Could not allocate a free shortcode after {attempts} attempts.')
        self.attempts = attempts


class ConfigurationError(ShortLinksError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
