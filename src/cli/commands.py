import click
from flask.cli import with_appcontext
from src.models import db, Subscription


@click.command("init-db")
@with_appcontext
def init_db():
    """Create the subscriptions table if it does not exist."""
    db.create_all()
    click.echo("✅ Subscriptions table ready.")


@click.command("list-subscriptions")
@click.argument("user_id")
@with_appcontext
def list_subscriptions(user_id):
    """Print every stored county/town row for USER_ID, oldest first."""
    rows = db.session.execute(
        db.select(Subscription)
        .filter_by(user_id=user_id)
        .order_by(Subscription.created_at, Subscription.id)
    ).scalars().all()

    if not rows:
        click.echo(f"📭 No subscriptions for user {user_id}.")
        return

    for row in rows:
        click.echo(f"{row.created_at.isoformat()}  {row.county}  {row.town}")
    click.echo(f"✅ {len(rows)} subscriptions for user {user_id}.")
