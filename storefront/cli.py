# storefront/cli.py
import click
from flask.cli import with_appcontext

from .extensions import get_store

@click.command("catalog")
@with_appcontext
def show_catalog():
    """Print the loaded product catalog."""
    store = get_store()
    for p in store.list_products():
        click.echo(f"{p.id:<12} {p.price:>10}  {p.name}")
    click.echo(f"{len(store.catalog)} products, discount every "
               f"{store.discounts.nth_order} orders ({store.discount_percentage:g}% off)")

def register_cli(app):
    app.cli.add_command(show_catalog)
