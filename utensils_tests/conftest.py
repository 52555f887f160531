import os

from utensils.cli.util import LoggingOptions, LoggingOutput, setup_logging
from utensils.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['UTENSILS_CONFIG_YAML'] = os.environ.get('UTENSILS_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# keep stdout for command output, structlog would print there by default
setup_logging(logging_output=LoggingOutput.PRETTY, logging_options=LoggingOptions(debug=True))
