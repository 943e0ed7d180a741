"""Container image references, digests, image sets, repository path mapping and the irel command."""

__version__ = "0.1.0"