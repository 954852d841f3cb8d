"""Infrastructure modules for the API.

Centralized infrastructure components:
- configuration: Settings management (Settings, WebhookSettings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale resolution and message lookup (Translator, translate)
- notifications: Best-effort webhook notifications (Notifier)
- http: Response sinks, response formatters and exception handlers
- services: Dependency injection providers (get_settings, SettingsDep)
"""
