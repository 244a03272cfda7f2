"""Bouncy Ball: a ball bouncing in a window under gravity, with a fading trail."""
