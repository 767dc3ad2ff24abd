"""Package identities, release models and version ordering."""
