class SassImportError(Exception):
    # base exception for all application-specific errors.
    pass

class ConfigError(SassImportError):
    # errors related to configuration.
    pass

class InvalidGlobPatternError(SassImportError):
    # a glob import whose trailing pattern is not "*" or "**/*".
    pass

class UnresolvableParentError(SassImportError):
    # a relative parent path could not be resolved while expanding a glob.
    pass

class EvaluationError(SassImportError):
    # errors reading, preprocessing or converting an imported file.
    pass

class UnresolvedImportError(SassImportError):
    # an import that produced no result, surfaced by the cli.
    pass
