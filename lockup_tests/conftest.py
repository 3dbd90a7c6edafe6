import os

from lockup.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['LOCKUP_CONFIG_YAML'] = os.environ.get('LOCKUP_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
