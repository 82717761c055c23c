"""chessmoves - pseudo-legal move generation over immutable board snapshots."""
