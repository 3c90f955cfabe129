# Standalone password helpers
