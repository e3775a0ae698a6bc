"""Command-line interface for database maintenance."""

import click

from mathcards.config import configure_logging, get_settings
from mathcards.core import container
from mathcards.database import dispose_engine, get_session_factory
from mathcards.seed import seed_owner


@click.group()
def cli() -> None:
    """mathcards maintenance commands."""
    configure_logging(get_settings().ENVIRONMENT)


@cli.command()
@click.option("--owner-id", required=True, help="Owner identity to seed data for.")
def seed(owner_id: str) -> None:
    """Create starter tags and flashcards for an owner."""
    session = get_session_factory(get_settings())()
    container.db.override(session)
    try:
        result = seed_owner(
            owner_id,
            tag_use_case=container.tag_use_case(),
            flashcard_use_case=container.flashcard_use_case(),
        )
    finally:
        container.db.reset_override()
        session.close()
        dispose_engine()

    click.echo(
        f"Seeded {result.tags_created} tags and {result.flashcards_created} flashcards "
        f"for {owner_id}"
    )


if __name__ == "__main__":
    cli()
