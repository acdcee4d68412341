"""HTTP route groups, one per profile."""
