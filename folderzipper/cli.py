"""CLI interface for folderzipper."""

import logging
import sys
from pathlib import Path

import click

from folderzipper.config import CompressionLevel, ConfigurationError, RunConfiguration
from folderzipper.crawler import AccessError, CrawlStats, FolderZipper


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-s", "--sourceFolder", "source_folder",
    type=click.Path(file_okay=False, path_type=Path),
    required=True,
    help="Source Folder",
)
@click.option(
    "-d", "--destinationFolder", "destination_folder",
    type=click.Path(file_okay=False, path_type=Path),
    required=True,
    help="Destination Folder",
)
@click.option(
    "-t/-T", "--textFile/--no-textFile", "create_text_file",
    default=True,
    help="Create a textfile with all the files in a folder.",
)
@click.option(
    "-u/-U", "--summaryTextFile/--no-summaryTextFile", "create_summary_text_file",
    default=True,
    help="Create a summary textfile with all the files.",
)
@click.option(
    "-p/-P", "--showProgress/--no-showProgress", "show_progress",
    default=True,
    help="Show progress in percent.",
)
@click.option("-o", "--overwrite", is_flag=True, help="Overwrite destination files")
@click.option(
    "-c", "--compression",
    type=click.Choice(CompressionLevel.names(), case_sensitive=False),
    default=CompressionLevel.DEFAULT.value,
    show_default=True,
    help="Compression level",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every directory decision")
def cli(
    source_folder: Path,
    destination_folder: Path,
    create_text_file: bool,
    create_summary_text_file: bool,
    show_progress: bool,
    overwrite: bool,
    compression: str,
    verbose: bool,
) -> None:
    """Zip the files of every folder below SOURCE into a mirrored DESTINATION tree."""
    _configure_logging(verbose)

    config = RunConfiguration(
        source_root=source_folder,
        destination_root=destination_folder,
        create_text_file=create_text_file,
        create_summary_text_file=create_summary_text_file,
        show_progress=show_progress,
        overwrite=overwrite,
        compression=CompressionLevel.from_name(compression),
    )

    try:
        config.validate()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _echo_configuration(config)

    try:
        stats = FolderZipper(config).run()
    except (ConfigurationError, AccessError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nInterrupted.", err=True)
        sys.exit(130)

    _echo_summary(stats)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _echo_configuration(config: RunConfiguration) -> None:
    click.echo(f"Source folder:      {config.source_root}")
    click.echo(f"Destination folder: {config.destination_root}")
    click.echo(f"Compression Level:  {config.compression.value}")

    if config.overwrite:
        click.echo("Overwrite files.")
    if config.create_text_file:
        click.echo("Creating a text file with file details in every folder.")
    if config.create_summary_text_file:
        click.echo("Creating a summary text file with all file details.")


def _echo_summary(stats: CrawlStats) -> None:
    click.echo()
    click.echo(
        f"Archived {stats.files_processed:,} files ({stats.total_bytes:,} bytes) "
        f"from {stats.directories_visited:,} folders"
    )
    click.echo(
        f"  Archives: {stats.archives_created:,} created, "
        f"{stats.archives_skipped:,} skipped, {stats.archives_failed:,} failed"
    )
    click.echo(
        f"  Text files: {stats.manifests_written:,} written, "
        f"{stats.manifests_skipped:,} skipped, {stats.manifests_failed:,} failed"
    )
    if stats.directories_unreadable:
        click.echo(f"  Unreadable folders: {stats.directories_unreadable:,}")
    click.echo(f"Total time taken : {_format_elapsed(stats.elapsed_seconds)}")


def _format_elapsed(seconds: float) -> str:
    millis = int(round(seconds * 1000))
    hours, remainder = divmod(millis, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    secs, millis = divmod(remainder, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"


def main() -> None:
    """Entry point for the CLI."""
    cli(standalone_mode=True)  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
