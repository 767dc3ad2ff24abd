"""sbt-plugin-releases - list published versions of sbt plugins and Scala artifacts

    Returns:
        int: Exit code
"""
import json
import logging
import sys

from args import parse_args
from cli_config import ConfigError, ResolverConfig, build_config
from common.http_client import PageFetcher
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import ExitCodes
from registry.merge import get_releases_from_registries
from registry.sbt_plugin import SbtPluginResolver
from versioning import maven_compare
from versioning.models import InvalidPackageNameError

logger = logging.getLogger(__name__)


def setup_logging(args):
    """Configure logging from --loglevel, --logfile and --quiet."""
    configure_logging(getattr(args, "LOG_LEVEL", None))
    if getattr(args, "QUIET", False):
        for handler in logging.getLogger().handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(logging.CRITICAL + 1)

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        ))
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def build_resolver(config: ResolverConfig) -> SbtPluginResolver:
    """Create a resolver whose fetcher honors the configured timeout and retries."""
    fetcher = PageFetcher(
        timeout=config.request_timeout,
        retry_max=config.retry_max,
        retry_delay=config.retry_delay,
    )
    return SbtPluginResolver(fetcher)


def resolve_packages(packages, config, resolver=None):
    """Resolve each package across the configured registries.

    Args:
        packages (list): Package names in group:artifact[_scala] form.
        config (ResolverConfig): Registries, strategy and HTTP settings.
        resolver (SbtPluginResolver, optional): Injected resolver.

    Raises:
        InvalidPackageNameError: If a package name is malformed.

    Returns:
        dict: Package name to ReleaseResult (or None when nothing was found).
    """
    resolver = resolver or build_resolver(config)
    results = {}
    for package_name in packages:
        logging.info("Looking up %s in %d registries.", package_name, len(config.registry_urls))
        results[package_name] = get_releases_from_registries(
            resolver.get_releases,
            package_name,
            config.registry_urls,
            config.registry_strategy,
        )
        if is_debug_enabled(logger):
            found = results[package_name]
            logger.debug("Resolved package", extra=extra_context(
                event="function_exit", component="cli", action="resolve_packages",
                package=package_name, outcome="found" if found else "not_found",
                count=len(found.releases) if found else 0
            ))
    return results


def render_results(results, latest_only=False):
    """Convert resolution results into a JSON-serializable mapping."""
    out = {}
    for package_name, result in results.items():
        if result is None:
            out[package_name] = None
        elif latest_only:
            out[package_name] = maven_compare.latest_version(result.versions)
        else:
            out[package_name] = result.to_dict()
    return out


def export_json(payload, path):
    """Write ``payload`` as JSON to ``path``.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)
    logging.info("JSON file has been successfully exported at: %s", path)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    setup_logging(args)

    try:
        config = build_config(args)
    except ConfigError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    try:
        results = resolve_packages(args.PACKAGES, config)
    except InvalidPackageNameError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.INPUT_ERROR.value)

    payload = render_results(results, latest_only=args.LATEST)
    if args.OUTPUT:
        try:
            export_json(payload, args.OUTPUT)
        except OSError as e:
            logging.error("JSON file couldn't be written to disk: %s", e)
            sys.exit(ExitCodes.FILE_ERROR.value)
    elif not args.QUIET:
        print(json.dumps(payload, indent=2))

    missing = [name for name, result in results.items() if result is None]
    if missing:
        logging.warning("No releases found for: %s", ", ".join(missing))
        sys.exit(ExitCodes.NOT_FOUND.value)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
