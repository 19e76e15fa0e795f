"""Core tweenr subsystems."""
