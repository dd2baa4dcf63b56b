"""Single-node election service: candidate registry, one vote per identity, tally."""
