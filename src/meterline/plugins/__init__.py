"""Plugin contracts: protocols, start context and bootstrap hook specifications."""
