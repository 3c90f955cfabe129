"""
Command-line interface for forwardsec.
"""

from __future__ import annotations

import logging

import click
from pydantic import ValidationError

from forwardsec.auth.passwords import derive_key, match_password
from forwardsec.common.config import Config
from forwardsec.common.logging_utils import setup_logger
from forwardsec.common.models import PasswordKey
from forwardsec.core import Identity, import_peer_identity


@click.group()
@click.option("--verbose", is_flag=True, help="Log protocol events at DEBUG level")
def cli(verbose: bool) -> None:  # noqa: FBT001
    """Forward-secret peer sessions"""
    setup_logger(log_level=logging.DEBUG if verbose else None)


@cli.command()
@click.option(
    "--message",
    default="hello world",
    help="Message to send from Alice to Bob (default: hello world)",
)
def demo(message: str) -> None:
    """Run a handshake and exchange one message in-process"""
    alice = Identity.new()
    bob = Identity.new()

    with alice.new_session_key() as alice_session, bob.new_session_key() as bob_session:
        alice_session.peer_session_key(
            import_peer_identity(bob.public()), bob_session.public()
        )
        bob_session.peer_session_key(
            import_peer_identity(alice.public()), alice_session.public()
        )

        envelope = alice_session.encrypt(message.encode())
        click.echo(f"Suite: {Config.CIPHER_SUITE}")
        click.echo(f"Alice: {alice.peer_identity().fingerprint()}")
        click.echo(f"Bob: {bob.peer_identity().fingerprint()}")
        click.echo(f"Envelope: {len(envelope)} bytes")
        click.echo(f"Decrypted: {bob_session.decrypt(envelope).decode()}")


@cli.command("hash-password")
@click.argument("password")
def hash_password(password: str) -> None:
    """Hash a password with a fresh salt and print it as JSON"""
    click.echo(derive_key(password).model_dump_json())


@cli.command("verify-password")
@click.argument("password")
@click.argument("key_json")
def verify_password(password: str, key_json: str) -> None:
    """Check a password against JSON printed by hash-password"""
    try:
        password_key = PasswordKey.model_validate_json(key_json)
    except ValidationError as err:
        msg = "KEY_JSON is not a valid password key"
        raise click.ClickException(msg) from err

    if not match_password(password, password_key):
        msg = "password does not match"
        raise click.ClickException(msg)
    click.echo("match")


if __name__ == "__main__":
    cli()
