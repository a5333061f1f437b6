"""Interactive changeset authoring for uv monorepos."""
