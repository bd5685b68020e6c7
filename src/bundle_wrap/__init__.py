"""bundle-wrap — run commands through ``bundle exec`` when a Gemfile is near.

Invoked as ``bw <command>`` or through an alias such as ``rspecw``, it
walks up from the working directory looking for a ``Gemfile`` and runs the
command under bundler, falling back to the system-wide binary when bundler
fails fast.
"""

from bundle_wrap.version import __version__

__all__: list[str] = ["__version__"]
