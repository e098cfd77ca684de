# backend/fittrack/cli.py
import click
from flask import current_app
from flask.cli import with_appcontext

from . import db
from .errors import FitTrackError, ValidationError
from .models.enums import ACCOUNT_TYPES
from .services import accounts


@click.command("create-user")
@click.argument("email")
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.option(
    "--account-type",
    type=click.Choice(ACCOUNT_TYPES),
    default="admin",
    show_default=True,
)
@click.password_option()
@with_appcontext
def create_user_command(email, first_name, last_name, account_type, password):
    """Create an account of any type (the public endpoint only makes "user")."""
    data = {
        "firstName": first_name,
        "lastName": last_name,
        "email": email,
        "password": password,
    }
    try:
        user = accounts.create_privileged_user(
            db.session, data, account_type, current_app.config["PASSWORD_HASH_METHOD"]
        )
    except ValidationError as err:
        for e in err.errors:
            click.echo(f"{e['field']}: {e['message']}", err=True)
        raise click.exceptions.Exit(1)
    except FitTrackError as err:
        raise click.ClickException(err.message)

    click.echo(f"✅ {account_type} created: {user.email} ({user.id})")


@click.command("password-reset-token")
@click.argument("email")
@with_appcontext
def password_reset_token_command(email):
    """Issue a password-reset token to hand to the account owner."""
    try:
        issued = accounts.request_password_reset(
            db.session, email, current_app.config["PASSWORD_RESET_TOKEN_TTL"]
        )
    except FitTrackError as err:
        raise click.ClickException(err.message)

    if issued is None:
        raise click.ClickException(f"no active account for {email}")

    plaintext, token = issued
    click.echo(plaintext)
    click.echo(f"expires {token.expiry.isoformat()} UTC", err=True)


def register_commands(app):
    app.cli.add_command(create_user_command)
    app.cli.add_command(password_reset_token_command)
