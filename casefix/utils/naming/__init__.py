"""Name tokenization, case rendering and renaming."""
