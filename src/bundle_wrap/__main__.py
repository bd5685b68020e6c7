"""Allow ``python -m bundle_wrap`` invocation.

``argv[0]`` is ``__main__.py`` in that case, so the nominal binary name is
forced and the first argument is taken as the command, exactly like
``bw <command>``.
"""

from __future__ import annotations

from bundle_wrap.cli.app import cli
from bundle_wrap.config import NOMINAL_BINARY_NAME

if __name__ == "__main__":
    cli(invoked_name=NOMINAL_BINARY_NAME)
