# Forward-secrecy core
from forwardsec.core.identity import Identity as Identity
from forwardsec.core.peer import PeerIdentity as PeerIdentity
from forwardsec.core.peer import import_peer_identity as import_peer_identity
from forwardsec.core.session import Session as Session
from forwardsec.core.session import SessionState as SessionState

__all__ = [
    "Identity",
    "PeerIdentity",
    "Session",
    "SessionState",
    "import_peer_identity",
]
