"""Walk through the vector lifecycle inside one namespace of an index."""

import json
import sys

import click

from pinecone_rest.client import Pinecone
from pinecone_rest.errors import PineconeError
from pinecone_rest.utils.logging import setup_logging


@click.command()
@click.option("--index", "index_name", required=True, help="Name of an existing index")
@click.option("--namespace", default="example-namespace", show_default=True)
@click.option(
    "--dimension",
    type=int,
    default=1024,
    show_default=True,
    help="Dimension of the index",
)
def main(index_name, namespace, dimension):
    """Upsert, fetch, update, query and delete vectors in NAMESPACE."""
    setup_logging()

    try:
        with Pinecone() as pc:
            ns = pc.index(index_name).namespace(namespace)

            result = ns.upsert(
                [
                    {"id": "vec1", "values": [0.5] * dimension},
                    {"id": "vec2", "values": [0.5] * dimension},
                ]
            )
            click.echo(f"Upserted: {result.get('upsertedCount', 0)}")

            fetched = ns.fetch(["vec1", "vec2"])
            click.echo(f"Fetched: {', '.join(sorted(fetched))}")

            ns.delete(ids=["vec1"])
            ns.update("vec2", values=[0.8] * dimension)

            matches = ns.query(vector=[0.8] * dimension, top_k=1).get("matches", [])
            click.echo("Top match:")
            click.echo(json.dumps(matches[:1], indent=2))
    except PineconeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
