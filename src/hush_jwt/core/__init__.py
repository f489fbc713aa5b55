"""Pure token primitives — encoding, claim assembly, and signing."""
