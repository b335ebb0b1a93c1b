"""Core: digests, checksums, version requirements, resolution, inventory."""
