"""Build docs.rs reference URLs for service clients."""

from __future__ import annotations

from awsdocs.constants import DOCS_URL_TEMPLATE
from awsdocs.models.version import ResolvedVersion
from awsdocs.models.service import Service, canonical_name


def build_docs_url(service: Service, version: ResolvedVersion) -> str:
    """Return the ``Client`` reference page of ``service`` at ``version``.

    Raises:
        TypeError: If ``version`` is not a :class:`ResolvedVersion`.

    Example:
        >>> build_docs_url(Service.S3, ResolvedVersion.latest())
        'https://docs.rs/aws-sdk-s3/latest/aws_sdk_s3/client/struct.Client.html'
    """
    if not isinstance(version, ResolvedVersion):
        raise TypeError(
            f"version must be a ResolvedVersion, not {type(version).__name__}"
        )
    return DOCS_URL_TEMPLATE.format(name=canonical_name(service), version=version)
