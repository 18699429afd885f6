"""Application layer: merge policy, slicing, and the reader port."""
