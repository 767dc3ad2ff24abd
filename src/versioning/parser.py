"""Package name parsing for sbt coordinates."""

from .models import InvalidPackageNameError, PackageIdentity


def parse_package_name(package_name: str) -> PackageIdentity:
    """Split "group:artifact[_scalaVersion]" into a PackageIdentity.

    The colon split must produce exactly a group and an artifact. The
    artifact is then split on underscores: the first part is the base
    artifact name, the second (when present) the Scala version.

    Raises:
        InvalidPackageNameError: If the name has no single group/artifact split.
    """
    parts = package_name.strip().split(":")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise InvalidPackageNameError(
            f"Invalid package name '{package_name}'. Expected 'groupId:artifactId'."
        )
    group_id, artifact_id = parts
    artifact_parts = artifact_id.split("_")
    artifact = artifact_parts[0]
    scala_version = artifact_parts[1] if len(artifact_parts) > 1 and artifact_parts[1] else None
    return PackageIdentity(
        group_id=group_id,
        artifact_id=artifact_id,
        artifact=artifact,
        scala_version=scala_version,
    )


def group_path(group_id: str, separator: str) -> str:
    """Render a dotted group id with the given separator ("." or "/")."""
    return separator.join(group_id.split("."))
