"""Graph collaborator contract and backends."""
