import logging

import pytest

from describe_action.core.logger import _PackageHandler


@pytest.fixture(autouse=True)
def _reset_package_handler():
    # configure_root_logger binds sys.stderr as it is at call time; drop the
    # handler after each test so it never outlives pytest's capture stream.
    yield
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, _PackageHandler)]:
        root.removeHandler(handler)
