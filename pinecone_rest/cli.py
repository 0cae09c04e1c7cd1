"""Command-line interface for pinecone-rest."""

import json

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from pinecone_rest.client import Pinecone
from pinecone_rest.errors import PineconeError
from pinecone_rest.models.index import IndexDescription
from pinecone_rest.models.vectors import QueryMatch
from pinecone_rest.utils.logging import setup_logging

console = Console()


def _parse_vector(ctx, param, value):
    if value is None:
        return None
    try:
        return [float(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter("expected comma-separated numbers, e.g. 0.1,0.2,0.3")


def _client(ctx: click.Context) -> Pinecone:
    return Pinecone(
        api_key=ctx.obj.get("api_key"),
        controller_host=ctx.obj.get("controller_host"),
    )


def _fail(exc: Exception):
    message = str(exc)
    if isinstance(exc, ValidationError):
        error = exc.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        message = f"Unexpected response from server: {location}: {error['msg']}"
    console.print(f"[red]Error: {message}[/red]")
    raise SystemExit(1)


@click.group()
@click.option("--api-key", help="API key (defaults to PINECONE_API_KEY)")
@click.option("--controller-host", help="Control-plane URL (defaults to PINECONE_CONTROLLER_HOST)")
@click.pass_context
def cli(ctx, api_key, controller_host):
    """pinecone-rest - inspect and query Pinecone indexes."""
    setup_logging()
    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key
    ctx.obj["controller_host"] = controller_host


@cli.command("list-indexes")
@click.pass_context
def list_indexes(ctx):
    """List every index in the project."""
    try:
        with _client(ctx) as pc:
            indexes = IndexDescription.list_from_api(pc.list_indexes())
    except (PineconeError, ValidationError) as e:
        _fail(e)

    if not indexes:
        console.print("[yellow]No indexes found[/yellow]")
        return

    table = Table(title="Indexes")
    table.add_column("Name", style="cyan")
    table.add_column("Dimension", style="white")
    table.add_column("Metric", style="white")
    table.add_column("State", style="green")
    table.add_column("Host", style="blue")

    for index in indexes:
        table.add_row(
            index.name,
            str(index.dimension) if index.dimension is not None else "-",
            index.metric,
            index.status.state,
            index.host,
        )

    console.print(table)


@cli.command("describe-index")
@click.argument("name")
@click.pass_context
def describe_index(ctx, name):
    """Show the configuration of index NAME."""
    try:
        with _client(ctx) as pc:
            index = IndexDescription.from_api(pc.describe_index(name))
    except (PineconeError, ValidationError) as e:
        _fail(e)

    table = Table(title=f"Index {index.name}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Host", index.host)
    table.add_row("Dimension", str(index.dimension) if index.dimension is not None else "-")
    table.add_row("Metric", index.metric)
    table.add_row("Vector type", index.vector_type)
    table.add_row("Ready", "yes" if index.status.ready else "no")
    table.add_row("State", index.status.state)
    table.add_row("Deletion protection", index.deletion_protection)
    if index.spec.serverless is not None:
        table.add_row(
            "Serverless", f"{index.spec.serverless.cloud}/{index.spec.serverless.region}"
        )
    if index.spec.pod is not None:
        table.add_row("Pod environment", index.spec.pod.environment)
    if index.tags:
        table.add_row("Tags", json.dumps(index.tags))

    console.print(table)


@cli.command()
@click.argument("name")
@click.pass_context
def stats(ctx, name):
    """Show vector counts of index NAME per namespace."""
    try:
        with _client(ctx) as pc:
            data = pc.index(name).describe_index_stats()
    except PineconeError as e:
        _fail(e)

    console.print(f"[bold]Dimension:[/bold] {data.get('dimension', '-')}")
    console.print(f"[bold]Total vectors:[/bold] {data.get('totalVectorCount', 0)}")

    namespaces = data.get("namespaces", {})
    if namespaces:
        table = Table(title="Namespaces")
        table.add_column("Namespace", style="cyan")
        table.add_column("Vectors", style="green")
        for namespace, summary in namespaces.items():
            table.add_row(namespace or "(default)", str(summary.get("vectorCount", 0)))
        console.print(table)


@cli.command()
@click.argument("name")
@click.option(
    "--vector",
    required=True,
    callback=_parse_vector,
    help="Query vector as comma-separated numbers",
)
@click.option("--top-k", default=10, show_default=True, type=int, help="Number of matches")
@click.option("--namespace", default=None, help="Namespace to search")
@click.pass_context
def query(ctx, name, vector, top_k, namespace):
    """Find the vectors in index NAME closest to --vector."""
    try:
        with _client(ctx) as pc:
            data = pc.index(name).query(vector=vector, top_k=top_k, namespace=namespace)
        matches = QueryMatch.list_from_api(data.get("matches", []))
    except (PineconeError, ValidationError) as e:
        _fail(e)

    if not matches:
        console.print("[yellow]No matches found[/yellow]")
        return

    table = Table(title="Matches")
    table.add_column("ID", style="cyan")
    table.add_column("Score", style="green")
    table.add_column("Metadata", style="white")
    for match in matches:
        table.add_row(
            match.id,
            f"{match.score:.4f}",
            json.dumps(match.metadata) if match.metadata else "",
        )

    console.print(table)


@cli.command()
@click.argument("name")
@click.argument("ids", nargs=-1, required=True)
@click.option("--namespace", default=None, help="Namespace to read from")
@click.pass_context
def fetch(ctx, name, ids, namespace):
    """Print vectors IDS of index NAME as JSON."""
    try:
        with _client(ctx) as pc:
            vectors = pc.index(name).fetch(list(ids), namespace=namespace)
    except PineconeError as e:
        _fail(e)

    missing = [vector_id for vector_id in ids if vector_id not in vectors]
    click.echo(json.dumps(vectors, indent=2))
    if missing:
        console.print(f"[yellow]Not found: {', '.join(missing)}[/yellow]")


if __name__ == "__main__":
    cli()
