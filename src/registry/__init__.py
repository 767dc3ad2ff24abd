"""Registry lookups for sbt artifacts."""
