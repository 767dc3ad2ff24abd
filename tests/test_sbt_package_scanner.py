"""Tests for the generic artifact-subdirectory scanner."""

from helpers import listing

from registry.sbt_package.client import SbtPackageScanner
from versioning.models import ArtifactUrls

ROOT = "https://repo.maven.apache.org/maven2/org/example"

POM_TEMPLATE = """<project>
  <url>{homepage}</url>
  <scm><url>{scm}</url></scm>
</project>"""


class TestListArtifactSubdirs:
    """Discovery of cross-built artifact directories."""

    def test_narrows_to_requested_scala_version(self, fetcher):
        fetcher.pages[f"{ROOT}/"] = listing("lib_2.12/", "lib_2.13/", "lib/")

        subdirs = SbtPackageScanner(fetcher).list_artifact_subdirs(ROOT, "lib", "2.13")

        assert subdirs == ["lib_2.13"]

    def test_keeps_all_cross_builds_without_match(self, fetcher):
        fetcher.pages[f"{ROOT}/"] = listing("lib/", "lib_2.12/", "lib_2.13/", "library_2.13/")

        subdirs = SbtPackageScanner(fetcher).list_artifact_subdirs(ROOT, "lib", "3")

        assert subdirs == ["lib", "lib_2.12", "lib_2.13"]

    def test_excludes_scalajs_and_native_builds(self, fetcher):
        fetcher.pages[f"{ROOT}/"] = listing(
            "lib_2.13/", "lib_sjs1_2.13/", "lib_native0.4_2.13/", "lib_sjs0.6_2.12/"
        )

        subdirs = SbtPackageScanner(fetcher).list_artifact_subdirs(ROOT, "lib", None)

        assert subdirs == ["lib_2.13"]

    def test_ignores_files_and_parent_links(self, fetcher):
        fetcher.pages[f"{ROOT}/"] = listing("lib_2.13/", "lib_2.13.sha1", "../")

        assert SbtPackageScanner(fetcher).list_artifact_subdirs(ROOT, "lib", None) == ["lib_2.13"]

    def test_absolute_path_links_are_made_relative(self, fetcher):
        fetcher.pages[f"{ROOT}/"] = listing(
            "/maven2/org/example/lib_2.13/", f"{ROOT}/lib_2.12/", "/maven2/org/"
        )

        subdirs = SbtPackageScanner(fetcher).list_artifact_subdirs(ROOT, "lib", None)

        assert subdirs == ["lib_2.13", "lib_2.12"]

    def test_unavailable_root_returns_none(self, fetcher):
        assert SbtPackageScanner(fetcher).list_artifact_subdirs(ROOT, "lib", "2.13") is None
        assert fetcher.calls == [f"{ROOT}/"]


class TestListReleases:
    """Release collection across artifact directories."""

    def test_merges_and_sorts_release_directories(self, fetcher):
        fetcher.pages[f"{ROOT}/lib_2.12/"] = listing("1.0.0/", "1.10.0/", "maven-metadata.xml")
        fetcher.pages[f"{ROOT}/lib_2.13/"] = listing("1.10.0/", "1.2.0/")

        releases = SbtPackageScanner(fetcher).list_releases(ROOT, ["lib_2.12", "lib_2.13"])

        assert releases == ["1.0.0", "1.2.0", "1.10.0"]

    def test_absolute_release_links_are_made_relative(self, fetcher):
        fetcher.pages[f"{ROOT}/lib_2.13/"] = listing(
            "/maven2/org/example/lib_2.13/1.1.0/",
            "/maven2/org/example/lib_2.13/1.0.0/",
            "/maven2/org/example/",
        )

        releases = SbtPackageScanner(fetcher).list_releases(ROOT, ["lib_2.13"])

        assert releases == ["1.0.0", "1.1.0"]

    def test_missing_subdirs_yield_none(self, fetcher):
        scanner = SbtPackageScanner(fetcher)

        assert scanner.list_releases(ROOT, None) is None
        assert scanner.list_releases(ROOT, []) is None
        assert scanner.list_releases(ROOT, ["lib_2.13"]) is None

    def test_pick_latest(self, fetcher):
        scanner = SbtPackageScanner(fetcher)

        assert scanner.pick_latest(["1.0.0", "1.10.0", "1.9.0"]) == "1.10.0"
        assert scanner.pick_latest([]) is None
        assert scanner.pick_latest(None) is None


class TestDeriveUrls:
    """Homepage and source URL discovery from POM files."""

    def test_reads_cross_built_pom(self, fetcher):
        fetcher.pages[f"{ROOT}/lib_2.13/1.0.0/lib_2.13-1.0.0.pom"] = POM_TEMPLATE.format(
            homepage="https://lib.example.org", scm="scm:git:https://github.com/example/lib.git"
        )

        urls = SbtPackageScanner(fetcher).derive_urls(ROOT, ["lib_2.13"], "1.0.0")

        assert urls == ArtifactUrls(
            homepage="https://lib.example.org",
            source_url="https://github.com/example/lib",
        )

    def test_falls_back_to_base_artifact_pom_name(self, fetcher):
        fetcher.pages[f"{ROOT}/lib_2.13/1.0.0/lib-1.0.0.pom"] = POM_TEMPLATE.format(
            homepage="https://lib.example.org", scm="https://github.com/example/lib"
        )

        urls = SbtPackageScanner(fetcher).derive_urls(ROOT, ["lib_2.13"], "1.0.0")

        assert urls.source_url == "https://github.com/example/lib"
        assert fetcher.calls == [
            f"{ROOT}/lib_2.13/1.0.0/lib_2.13-1.0.0.pom",
            f"{ROOT}/lib_2.13/1.0.0/lib-1.0.0.pom",
        ]

    def test_no_version_or_subdirs_fetches_nothing(self, fetcher):
        scanner = SbtPackageScanner(fetcher)

        assert scanner.derive_urls(ROOT, ["lib_2.13"], None) == ArtifactUrls()
        assert scanner.derive_urls(ROOT, None, "1.0.0") == ArtifactUrls()
        assert fetcher.calls == []

    def test_missing_pom_yields_empty_urls(self, fetcher):
        assert SbtPackageScanner(fetcher).derive_urls(ROOT, ["lib"], "1.0.0") == ArtifactUrls()
        assert fetcher.calls == [f"{ROOT}/lib/1.0.0/lib-1.0.0.pom"]
