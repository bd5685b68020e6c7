"""Infrastructure layer — filesystem and process integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~bundle_wrap.exceptions.BundleWrapError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from bundle_wrap.infra.manifest_locator import locate_manifest
from bundle_wrap.infra.process_runner import SubprocessRunner

__all__: list[str] = [
    "SubprocessRunner",
    "locate_manifest",
]
