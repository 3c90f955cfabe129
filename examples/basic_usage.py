"""
Basic usage example of forwardsec.

Two parties create identities, exchange signed session keys, and send each
other one message. In a real deployment the exported blobs travel over
whatever transport the application already has.
"""

import logging
import sys
import threading
from pathlib import Path

# Add the project root to the path to import forwardsec
sys.path.insert(0, str(Path(__file__).parent.parent))

from forwardsec import ForwardSecError, Identity, import_peer_identity


def main() -> None:
    # Configure logging
    logging.basicConfig(level=logging.DEBUG)
    logger = logging.getLogger(__name__)

    try:
        alice, bob = Identity.new(), Identity.new()

        # Identities are exchanged out of band
        bob_as_seen_by_alice = import_peer_identity(bob.public())
        alice_as_seen_by_bob = import_peer_identity(alice.public())

        with alice.new_session_key() as alice_session, bob.new_session_key() as bob_session:
            alice_session.peer_session_key(bob_as_seen_by_alice, bob_session.public())
            bob_session.peer_session_key(alice_as_seen_by_bob, alice_session.public())

            envelope = alice_session.encrypt(b"hello world")
            logger.info("Bob received: %s", bob_session.decrypt(envelope).decode())

            # Bound sessions need no locking for encrypt/decrypt
            replies = [bob_session.encrypt(f"reply {i}".encode()) for i in range(4)]
            threads = [
                threading.Thread(
                    target=lambda e=e: logger.info(
                        "Alice received: %s", alice_session.decrypt(e).decode()
                    )
                )
                for e in replies
            ]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()
    except ForwardSecError:
        logger.exception("Error")
        sys.exit(1)


if __name__ == "__main__":
    main()
