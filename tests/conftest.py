import pytest

from forwardsec import Identity, import_peer_identity


@pytest.fixture
def alice() -> Identity:
    return Identity.new()


@pytest.fixture
def bob() -> Identity:
    return Identity.new()


@pytest.fixture
def bound_pair(alice, bob):
    """Two sessions that completed a mutual handshake."""
    alice_session = alice.new_session_key()
    bob_session = bob.new_session_key()
    alice_session.peer_session_key(
        import_peer_identity(bob.public()), bob_session.public()
    )
    bob_session.peer_session_key(
        import_peer_identity(alice.public()), alice_session.public()
    )
    return alice_session, bob_session
