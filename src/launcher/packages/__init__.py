from .reference import PackageReference  # noqa: F401

__all__ = ["PackageReference"]
