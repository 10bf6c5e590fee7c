from webrev.config.settings import (
    LoggingSettings,
    RepositorySettings,
    Settings,
    WebrevSettings,
    load_settings,
)

__all__ = [
    'Settings',
    'LoggingSettings',
    'RepositorySettings',
    'WebrevSettings',
    'load_settings',
]
