"""Format generators: document outlines and the registry that dispatches them."""
