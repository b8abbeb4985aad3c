import os

import structlog

from serializator.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['SERIALIZATOR_CONFIG_YAML'] = os.environ.get('SERIALIZATOR_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# route structlog through the stdlib so logs end up in pytest's log capture instead of stdout (which doctests compare)
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.KeyValueRenderer(key_order=['event']),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
)
