"""CLI interface for linkrouter."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from linkrouter.config import DEFAULT_CONFIG_PATH, RouterConfig, load_config
from linkrouter.utils.filtering import filter_ignored
from linkrouter.utils.launcher import open_with_firefox
from linkrouter.utils.processes import find_running_firefox
from linkrouter.utils.registry import RegistrationError, register, unregister


@click.group()
def cli():
    """linkrouter - Open links in the Firefox profile already in use."""
    pass


def setup_logging(verbose: bool, quiet: bool, log_file: Optional[Path] = None) -> None:
    """Configure logging based on verbosity."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        filename=log_file,
    )


def _load_config_or_exit(config_path: Path) -> Optional[RouterConfig]:
    try:
        return load_config(config_path)
    except ValueError as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)


def config_option(func):
    return click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=DEFAULT_CONFIG_PATH,
        envvar="LINKROUTER_CONFIG",
        show_default=True,
        help="Config file with ignored_urls and ignored_urls_regex",
    )(func)


@cli.command(name="open")
@click.argument("urls", nargs=-1)
@config_option
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    envvar="LINKROUTER_DRY_RUN",
    help="Resolve the browser without launching it",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="LINKROUTER_LOG_FILE",
    help="Write logs to a file instead of stderr",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Detailed logging",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Minimal output",
)
def open_command(
    urls: tuple[str, ...],
    config_path: Path,
    dry_run: bool,
    log_file: Optional[Path],
    verbose: bool,
    quiet: bool,
) -> None:
    """Open URLs in the running Firefox profile.

    URLs matching the ignore rules of the config file are dropped. When no
    Firefox is running the default profile is used.
    """
    setup_logging(verbose, quiet, log_file)
    logger = logging.getLogger(__name__)
    logger.debug(f"Args: {list(urls)}")

    config = _load_config_or_exit(config_path)
    filtered_urls = filter_ignored(urls, config)
    if not filtered_urls:
        click.echo("All URLs got filtered out, nothing to do")
        sys.exit(0)

    instances = find_running_firefox()
    firefox_info = instances[0] if instances else None
    if firefox_info is None:
        logger.info("No Firefox processes found, opening links in the default profile")
    elif firefox_info.profile_name:
        logger.info(f"Found existing Firefox process with profile: {firefox_info.profile_name}")
    else:
        logger.info(
            "Didn't spot any Firefox with a profile currently in use, "
            "opening links in the default profile"
        )

    try:
        command = open_with_firefox(filtered_urls, firefox_info, dry_run=dry_run)
    except OSError as e:
        click.echo(f"Error launching Firefox: {e}", err=True)
        sys.exit(1)

    if dry_run:
        click.echo(f"Would run: {' '.join(command)}")


@cli.command(name="check")
@click.argument("urls", nargs=-1, required=True)
@config_option
def check_command(urls: tuple[str, ...], config_path: Path) -> None:
    """Show whether each URL would be ignored.

    Examples:
        linkrouter check https://pixel.tracking.com/collect
        linkrouter check --config rules.yaml example.com/path
    """
    config = _load_config_or_exit(config_path)
    if config is None:
        click.echo(f"No config at {config_path}, nothing is ignored")

    for url in urls:
        ignored = config is not None and config.is_ignored(url)
        click.echo(f"{'ignored' if ignored else 'allowed'}  {url}")


def _launch_command() -> str:
    executable = Path(sys.argv[0]).resolve()
    return f'"{executable}" open'


@cli.command(name="register")
def register_command() -> None:
    """Register linkrouter as a browser (Windows only)."""
    setup_logging(verbose=False, quiet=False)
    executable = str(Path(sys.argv[0]).resolve())
    try:
        register(_launch_command(), executable)
    except (RegistrationError, OSError) as e:
        click.echo(f"Error registering: {e}", err=True)
        sys.exit(1)
    click.echo(
        "linkrouter registered as a browser. "
        "Open Settings > Default Apps to set it as default"
    )


@cli.command(name="unregister")
def unregister_command() -> None:
    """Remove the browser registration (Windows only)."""
    setup_logging(verbose=False, quiet=False)
    try:
        unregister()
    except (RegistrationError, OSError) as e:
        click.echo(f"Error unregistering: {e}", err=True)
        sys.exit(1)
    click.echo("linkrouter unregistered")


if __name__ == "__main__":
    cli()
