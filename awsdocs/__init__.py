"""
awsdocs: open AWS SDK for Rust client documentation

awsdocs lets you pick an AWS service from a fixed catalog and opens the
docs.rs reference page of its ``Client``. With ``--sync`` it first looks up
the crate version your Cargo project actually resolved, so the page matches
the code you are compiling against.

Library use::

    from awsdocs import PackageGraph, Service, build_docs_url, resolve

    version = resolve(Service.LAMBDA, PackageGraph.from_command())
    print(build_docs_url(Service.LAMBDA, version))
"""

from __future__ import annotations

from awsdocs.__version__ import __version__
from awsdocs.models import ResolvedVersion, Service, canonical_name, list_services
from awsdocs.core import PackageGraph, build_docs_url, resolve

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__license__ = "Apache-2.0"
__description__ = "Open docs.rs pages for AWS SDK for Rust clients."

__all__ = [
    "__version__",
    "Service",
    "ResolvedVersion",
    "PackageGraph",
    "canonical_name",
    "list_services",
    "resolve",
    "build_docs_url",
]
