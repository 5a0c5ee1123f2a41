"""Top-level package for the journal-insights project.

This package simply exposes the public run() helper so callers can do
`python -m journal_insights` or `from journal_insights import run; run()`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("journal-insights")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .workflows.analysis_pipeline import run  # convenience re-export

__all__ = ["run", "__version__"]
