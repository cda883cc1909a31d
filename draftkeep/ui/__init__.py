"""Qt widgets layer: host adapters and actions."""
