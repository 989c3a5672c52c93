"""CLI entry point for rpc-openapi."""

from pathlib import Path

import click

from rpc_openapi.config import get_settings
from rpc_openapi.errors import RpcOpenApiError
from rpc_openapi.generator.document import GenerateOptions, generate_openapi_document
from rpc_openapi.generator.operation import compute_path
from rpc_openapi.loader import load_backend, load_object
from rpc_openapi.logging import configure_logging
from rpc_openapi.output import detect_output_format, dump_document
from rpc_openapi.router.walker import iter_procedures


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from RPC_OPENAPI_LOG_LEVEL).")
def main(log_level: str | None):
    """rpc-openapi: describe an RPC router as an OpenAPI document."""
    configure_logging(log_level or get_settings().log_level)


@main.command()
@click.argument("router_ref")
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the OpenAPI document.")
@click.option("--prefix", default=None, help="Path prefix for every operation, e.g. /trpc.")
@click.option("--title", default=None, help="info.title of the document.")
@click.option("--api-version", default=None, help="info.version of the document.")
@click.option("--schema-library", default=None, help="Module the router's schemas were built with.")
@click.option("--legacy-converter", default=None, help="module:attribute of the fallback JSON Schema converter.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format.")
def generate(
    router_ref: str,
    output: Path,
    prefix: str | None,
    title: str | None,
    api_version: str | None,
    schema_library: str | None,
    legacy_converter: str | None,
    fmt: str,
):
    """Generate an OpenAPI document from ROUTER_REF (module:attribute)."""
    settings = get_settings()
    library = schema_library or settings.schema_library
    if not library:
        raise click.UsageError("A schema library is required (--schema-library or RPC_OPENAPI_SCHEMA_LIBRARY).")

    options = GenerateOptions(
        path_prefix=prefix if prefix is not None else settings.path_prefix,
        title=title if title is not None else settings.title,
        version=api_version if api_version is not None else settings.version,
    )
    try:
        router = load_object(router_ref)
        backend = load_backend(library, legacy_converter or settings.legacy_converter)
        document = generate_openapi_document(router, backend, options)
    except RpcOpenApiError as e:
        raise click.ClickException(str(e)) from e

    if fmt == "auto":
        fmt = detect_output_format(output)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_document(document, fmt), encoding="utf-8")
    click.echo(f"Wrote {len(document['paths'])} paths to {output}")


@main.command()
@click.argument("router_ref")
@click.option("--prefix", default=None, help="Path prefix for every operation, e.g. /trpc.")
def routes(router_ref: str, prefix: str | None):
    """List the HTTP routes ROUTER_REF would produce."""
    path_prefix = prefix if prefix is not None else get_settings().path_prefix
    try:
        procedures = list(iter_procedures(load_object(router_ref)))
    except RpcOpenApiError as e:
        raise click.ClickException(str(e)) from e

    for procedure in procedures:
        method = "GET" if procedure.is_query else "POST"
        click.echo(f"{method:<5} {compute_path(procedure.name, path_prefix)}  {procedure.name}")
