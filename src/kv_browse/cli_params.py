"""Shared CLI parameter definitions.

Each function returns a Typer option used inside ``Annotated`` so that
option names and help text are defined once:

    @app.command()
    def my_command(
        region: Annotated[str, aws_region_option()] = "us-east-1",
    ):
        pass
"""

import typer


def aws_access_key_option() -> typer.models.OptionInfo:
    """AWS access key ID option."""
    return typer.Option("--access-key-id", help="AWS access key ID")


def aws_secret_key_option() -> typer.models.OptionInfo:
    """AWS secret access key option."""
    return typer.Option("--secret-access-key", help="AWS secret access key")


def aws_session_token_option() -> typer.models.OptionInfo:
    """AWS session token option."""
    return typer.Option("--session-token", help="AWS session token")


def aws_region_option() -> typer.models.OptionInfo:
    """AWS region option."""
    return typer.Option("--region", help="AWS region name")


def aws_endpoint_url_option() -> typer.models.OptionInfo:
    """AWS endpoint URL option."""
    return typer.Option("--endpoint-url", help="Custom S3 endpoint URL")


def aws_profile_option() -> typer.models.OptionInfo:
    """AWS profile option."""
    return typer.Option("--aws-profile", help="AWS CLI profile name")


def depth_option() -> typer.models.OptionInfo:
    """Listing depth option."""
    return typer.Option(
        "--depth", "-d", help="Path segments below PATH to resolve into names"
    )


def metadata_option() -> typer.models.OptionInfo:
    """File metadata toggle."""
    return typer.Option(
        "--meta/--no-meta", help="Include file metadata or only file names"
    )


def track_inflight_option() -> typer.models.OptionInfo:
    """In-flight request reporting toggle."""
    return typer.Option(
        "--track-inflight",
        help="Log in-flight S3 requests when the report signal is received",
    )
