"""Rotating solar board: positions, rotation and probe reachability."""
