class ConfigException(Exception):
    """Base for all configuration failures"""

    pass


class ConfigValueException(ConfigException):
    pass


class ConfigTypeException(ConfigException):
    pass
