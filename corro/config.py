import os

from corro.exceptions.common_exceptions import EnvInvalidException

# Error map key for rules evaluated against the root object itself
ROOT_KEY = os.getenv("CORRO_ROOT_KEY", "*")

# Joins nested keys and array indexes into a dotted path
PATH_SEPARATOR = os.getenv("CORRO_PATH_SEPARATOR", ".")

# Reported for rule names missing from the registry
INVALID_RULE_MESSAGE = os.getenv("CORRO_INVALID_RULE_MESSAGE", "invalid rule specified")

# Logging
LOG_LEVEL = os.getenv("CORRO_LOG_LEVEL", "WARNING").upper()
LOG_FILE_NAME = os.getenv("CORRO_LOG_FILE_NAME")

# Localization of rule messages
LOCALE_DEFAULT = os.getenv("CORRO_LOCALE_DEFAULT", "en")
LOCALE_FALLBACK = os.getenv("CORRO_LOCALE_FALLBACK", "en")
LOCALE_PATH = os.getenv("CORRO_LOCALE_PATH", os.path.join(os.getcwd(), "lang"))


def reload() -> None:
    """Re-read every setting from the environment."""
    global ROOT_KEY, PATH_SEPARATOR, INVALID_RULE_MESSAGE, LOG_LEVEL, LOG_FILE_NAME
    global LOCALE_DEFAULT, LOCALE_FALLBACK, LOCALE_PATH

    separator = os.getenv("CORRO_PATH_SEPARATOR", ".")
    if not separator:
        raise EnvInvalidException("CORRO_PATH_SEPARATOR", separator)

    ROOT_KEY = os.getenv("CORRO_ROOT_KEY", "*")
    PATH_SEPARATOR = separator
    INVALID_RULE_MESSAGE = os.getenv("CORRO_INVALID_RULE_MESSAGE", "invalid rule specified")
    LOG_LEVEL = os.getenv("CORRO_LOG_LEVEL", "WARNING").upper()
    LOG_FILE_NAME = os.getenv("CORRO_LOG_FILE_NAME")
    LOCALE_DEFAULT = os.getenv("CORRO_LOCALE_DEFAULT", "en")
    LOCALE_FALLBACK = os.getenv("CORRO_LOCALE_FALLBACK", "en")
    LOCALE_PATH = os.getenv("CORRO_LOCALE_PATH", os.path.join(os.getcwd(), "lang"))
