"""Command line tools for browsing shapes and exercising the wire codecs."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

import awswire.services  # noqa: F401  # fills the shape registry
from awswire.enums import WireEnum
from awswire.errors import WireError
from awswire.logging_utils import configure_logging
from awswire.model import ServiceRequest, WireModel
from awswire.protocol import JsonMarshaller, marshall_request, unmarshall_json, unmarshall_xml
from awswire.registry import ShapeClass, get_registry, get_shape_or_raise
from awswire.shapes import shape_for

app = typer.Typer(
    name="awswire",
    help="Inspect AWS service shapes and run documents through their wire codecs.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


class DocumentFormat(str, Enum):
    JSON = "json"
    XML = "xml"


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs from the codecs"),
) -> None:
    configure_logging(profile="cli", level="DEBUG" if verbose else None)


def _exit_with_error(message: str) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(1)


def _lookup(name: str) -> ShapeClass:
    try:
        return get_shape_or_raise(name)
    except WireError as exc:
        _exit_with_error(str(exc))


def _lookup_record(name: str) -> type[WireModel]:
    shape_class = _lookup(name)
    if not issubclass(shape_class, WireModel):
        _exit_with_error(f"{name} is an enum, not a record")
    return shape_class


def _kind_of(shape_class: ShapeClass) -> str:
    if issubclass(shape_class, WireEnum):
        return "enum"
    if issubclass(shape_class, ServiceRequest):
        return "request"
    return "record"


@app.command()
def shapes(
    service: Optional[str] = typer.Option(None, "--service", "-s", help="Only list shapes of this service"),
) -> None:
    """List registered shapes."""
    table = Table(title="Registered shapes")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Members", justify="right")
    for name, shape_class in get_registry().list_shapes().items():
        if service and not name.startswith(f"{service}."):
            continue
        if issubclass(shape_class, WireEnum):
            count = len(shape_class)
        else:
            count = len(shape_for(shape_class).members)
        table.add_row(name, _kind_of(shape_class), str(count))
    console.print(table)


@app.command()
def describe(name: str = typer.Argument(..., help="Qualified shape name, e.g. cloudwatch.Datapoint")) -> None:
    """Show the wire layout of a shape."""
    shape_class = _lookup(name)
    if issubclass(shape_class, WireEnum):
        table = Table(title=name)
        table.add_column("Variant", no_wrap=True)
        table.add_column("Wire value", no_wrap=True)
        for member in shape_class:
            table.add_row(member.name, member.value)
        console.print(table)
        return

    if issubclass(shape_class, ServiceRequest):
        binding = shape_class.binding
        target = binding.target or binding.action or binding.request_uri
        console.print(f"{binding.service_name} {binding.protocol} {binding.http_method} {target}", markup=False)

    table = Table(title=name)
    table.add_column("Field", no_wrap=True)
    table.add_column("Wire name", style="cyan", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Location")
    for member in shape_for(shape_class).members:
        kind = member.type_ref.kind
        if member.type_ref.element is not None:
            kind = f"{kind}<{member.type_ref.element.kind}>"
        table.add_row(member.name, member.wire_name, kind, member.location)
    console.print(table)


@app.command("enum")
def enum_values(name: str = typer.Argument(..., help="Qualified enum name, e.g. ec2.InstanceType")) -> None:
    """Print the wire values of an enum, one per line."""
    shape_class = _lookup(name)
    if not issubclass(shape_class, WireEnum):
        _exit_with_error(f"{name} is a record, not an enum")
    for value in shape_class.values():
        typer.echo(value)


@app.command()
def decode(
    name: str = typer.Argument(..., help="Qualified record name"),
    path: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, readable=True, help="Response document"
    ),
    document_format: DocumentFormat = typer.Option(  # noqa: B008
        DocumentFormat.JSON, "--format", "-f", help="Document format"
    ),
) -> None:
    """Decode a response document and print the record as JSON."""
    model = _lookup_record(name)
    data = path.read_bytes()
    try:
        if document_format is DocumentFormat.XML:
            record = unmarshall_xml(model, data)
        else:
            record = unmarshall_json(model, data)
        if record is None:
            typer.echo("null")
            return
        rendered = JsonMarshaller().to_bytes(record, list(shape_for(model).members)).decode("utf-8")
    except WireError as exc:
        logger.debug("cli.decode.error name={} error={}", name, exc)
        _exit_with_error(str(exc))
    console.print_json(rendered)


@app.command()
def encode(
    name: str = typer.Argument(..., help="Qualified request name"),
    path: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, readable=True, help="Request fields as JSON"
    ),
) -> None:
    """Build the HTTP request for a request record given as JSON."""
    model = _lookup_record(name)
    if not issubclass(model, ServiceRequest):
        _exit_with_error(f"{name} is not a request shape")
    try:
        record = unmarshall_json(model, path.read_bytes())
        if record is None:
            _exit_with_error("request document is null")
        request = marshall_request(record)
    except WireError as exc:
        logger.debug("cli.encode.error name={} error={}", name, exc)
        _exit_with_error(str(exc))

    typer.echo(f"{request.http_method} {request.resource_path}")
    for header, value in request.headers.items():
        typer.echo(f"{header}: {value}")
    for parameter, value in request.parameters.items():
        typer.echo(f"{parameter}={value}")
    if request.content:
        typer.echo("")
        typer.echo(request.content.decode("utf-8"))
