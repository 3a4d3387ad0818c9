"""
API package containing versioned routes.

Each version subpackage (currently only ``v1``) exposes a top‑level
``router`` bundling its endpoints; ``main.create_app`` mounts it under
the matching prefix.
"""
