"""Infrastructure modules for the FeedFind application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Internationalization engine (I18nService, Translator, formatters)
- services: Application-scoped providers (get_settings, get_i18n_service)
"""
