# -*- coding: utf-8 -*-


class I18nAuditError(Exception):
    """Base class for every error raised by the audit."""


class ConfigurationError(I18nAuditError):
    """The environment (catalogues, ignore list, options) is malformed."""


class BackendError(I18nAuditError):
    """The translation backend cannot supply what was asked of it."""
