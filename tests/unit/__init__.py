"""Unit tests."""

from configuration import configuration  # noqa: F401

config_dict = {
    "name": "test",
    "service": {
        "host": "localhost",
        "port": 3000,
        "workers": 1,
        "color_log": True,
        "access_log": True,
        "environment": "development",
    },
    "upstream": {
        "completions_url": "http://test.com:1234/v1/completions",
        "api_key": "test-key",
    },
    "history": {
        "type": "memory",
        "default_limit": 50,
    },
}

# NOTE: Configuration must be initialized before importing app.main,
# since the module reads it during import time
configuration.init_from_dict(config_dict)
