# Cryptographic collaborators of the session core
