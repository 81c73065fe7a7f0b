"""Command-line interface for kv-browse.

Commands:
    - list: Print the directory listing of an S3 path as JSON
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    aws_access_key_option,
    aws_endpoint_url_option,
    aws_profile_option,
    aws_region_option,
    aws_secret_key_option,
    aws_session_token_option,
    depth_option,
    metadata_option,
    track_inflight_option,
)
from .core import settings
from .listing import build_listing
from .objectstorage import S3ClientManager
from .schemas import S3StorageConfig, open_store
from .transport import InflightTracker

app = typer.Typer(
    name="kv-browse",
    help="Browse a flat key namespace as a directory tree.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"kv-browse {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    kv-browse: directory listings synthesized from object keys.
    """
    pass


@app.command("list")
def list_cmd(
    url: Annotated[str, typer.Argument(help="Path to list, as s3://bucket/path")],
    depth: Annotated[int, depth_option()] = settings.default_depth,
    include_metadata: Annotated[bool, metadata_option()] = True,
    access_key_id: Annotated[Optional[str], aws_access_key_option()] = None,
    secret_access_key: Annotated[Optional[str], aws_secret_key_option()] = None,
    session_token: Annotated[Optional[str], aws_session_token_option()] = None,
    region_name: Annotated[str, aws_region_option()] = "us-east-1",
    endpoint_url: Annotated[Optional[str], aws_endpoint_url_option()] = None,
    aws_profile: Annotated[Optional[str], aws_profile_option()] = None,
    track_inflight: Annotated[bool, track_inflight_option()] = False,
) -> None:
    """
    List files and synthetic directories under a path.

    Examples:
        kv-browse list s3://bucket/photos --depth 1
        kv-browse list s3://bucket --no-meta --endpoint-url http://localhost:9000
    """
    try:
        bucket, path = S3ClientManager.parse_s3_url(url)
        config = S3StorageConfig(
            bucket=bucket,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
        )

        tracker = None
        if track_inflight:
            tracker = InflightTracker()
            tracker.install_signal_handler(settings.inflight_report_signal)

        store = open_store(config, tracker=tracker)
        listing = build_listing(
            path, store, include_metadata=include_metadata, depth=depth
        )
        typer.echo(listing.model_dump_json(indent=2))

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
